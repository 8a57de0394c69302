import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import get_settings
from src.core.logging_config import setup_logging
from src.routers import quiz as quiz_router

settings = get_settings()

# Configure logging VERY early
setup_logging(settings.log_level, settings.log_format)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup logic: load static data once so bad configuration fails fast
    logger.info(f"{settings.app_name} starting up...")
    repository = quiz_router.get_question_repository()
    quiz_router.get_storage()
    logger.info(f"Loaded {len(repository)} quiz questions")

    yield  # Service runs here

    logger.info(f"{settings.app_name} shutting down...")


app = FastAPI(title=settings.app_name, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Include Routers ---
app.include_router(quiz_router.router, prefix=settings.api_prefix, tags=["quiz"])


@app.get("/health", tags=["Health Check"])
async def health_check():
    return {"status": "ok", "message": f"{settings.app_name} is running."}


if __name__ == "__main__":
    import uvicorn
    # Better to run with `uvicorn main:app --reload` from the project root directory
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
