from functools import lru_cache
from typing import List, Literal
import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from services.color_engine.loader import DEFAULT_QUESTIONS_PATH

# Load .env file if it exists, for local development
# In production, environment variables should be set directly.
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv()


class AppSettings(BaseSettings):
    app_name: str = "Color Energy Profile Engine"
    api_prefix: str = "/api"

    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    storage_backend: Literal["memory", "database"] = "memory"
    database_url: str = "sqlite:///./color_engine.db"
    database_echo: bool = False

    questions_path: str = str(DEFAULT_QUESTIONS_PATH)
    cors_origins: List[str] = ["*"]

    model_config = SettingsConfigDict(env_prefix='COLOR_ENGINE_')


@lru_cache()
def get_settings() -> AppSettings:
    return AppSettings()
