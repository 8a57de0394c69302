from functools import lru_cache
from typing import Any, Dict, List

from fastapi import APIRouter, Depends, HTTPException, Response
import logging

from services.color_engine.comparison import compare_results
from services.color_engine.definitions import get_personality_profile, list_color_profiles
from services.color_engine.engine import ResultAssembler, ResultStorage
from services.color_engine.formatters import format_report_title
from services.color_engine.loader import QuestionRepository, load_questions_from_file, question_to_dict
from services.color_engine.models import (
    ComparisonError,
    PersonaDynamics,
    PersonalityType,
    QuizResult,
    ResultComparison,
    ResultNotFoundError,
    ValidationError,
)
from src.core.config import get_settings
from src.db.database import get_engine, get_session_factory
from src.db.models import Base
from src.schemas.quiz import (
    ComparisonRequest,
    ResultResponse,
    SubmissionRequest,
    SubmissionResponse,
    SubmittedAnswer,
)
from src.services.storage import DatabaseResultStorage, InMemoryResultStorage

router = APIRouter()
logger = logging.getLogger(__name__)


# --- Dependencies ---

@lru_cache()
def get_question_repository() -> QuestionRepository:
    return load_questions_from_file(get_settings().questions_path)


@lru_cache()
def get_storage() -> ResultStorage:
    settings = get_settings()
    if settings.storage_backend == "database":
        engine = get_engine(settings.database_url, echo=settings.database_echo)
        Base.metadata.create_all(engine)
        logger.info("Using database result storage")
        return DatabaseResultStorage(get_session_factory(engine))
    logger.info("Using in-memory result storage")
    return InMemoryResultStorage()


def get_assembler(
    storage: ResultStorage = Depends(get_storage),
    questions: QuestionRepository = Depends(get_question_repository),
) -> ResultAssembler:
    return ResultAssembler(storage, questions=questions)


# --- Helpers ---

def _is_rated(answers: List[SubmittedAnswer]) -> bool:
    """True for rated submissions, False for single-select; a mix of both is rejected."""
    rated = [a.rating is not None for a in answers]
    if all(rated):
        return True
    if not any(rated):
        return False
    raise ValidationError("Either every answer must carry a rating or none may")


def _rated_answers(answers: List[SubmittedAnswer]) -> List[Dict[str, Any]]:
    return [
        {"question_id": a.question_id, "color": a.selected_color, "rating": a.rating}
        for a in answers
    ]


def _to_result_response(result: QuizResult) -> ResultResponse:
    return ResultResponse(
        id=result.id,
        user_id=result.user_id,
        scores=result.scores,
        unconscious_scores=result.unconscious_scores,
        dominant_color=result.dominant_color,
        secondary_color=result.secondary_color,
        personality_type=result.personality_type,
        created_at=result.created_at,
        title=format_report_title(result),
    )


def _get_or_404(assembler: ResultAssembler, result_id: int) -> QuizResult:
    try:
        return assembler.fetch(result_id)
    except ResultNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


# --- Routes ---

@router.get("/quiz/questions")
async def list_questions(repository: QuestionRepository = Depends(get_question_repository)):
    return [question_to_dict(q) for q in repository.all()]


@router.post("/quiz/submit", response_model=SubmissionResponse)
async def submit_quiz(
    request: SubmissionRequest,
    assembler: ResultAssembler = Depends(get_assembler),
):
    """
    Scores a quiz submission, stores the result and returns the scores,
    dominant/secondary colors and personality type.
    """
    try:
        if _is_rated(request.answers):
            unconscious = None
            if request.unconscious_answers is not None:
                unconscious = _rated_answers(request.unconscious_answers)
            result = assembler.submit(
                _rated_answers(request.answers),
                unconscious_answers=unconscious,
                user_id=request.user_id,
            )
        else:
            if request.unconscious_answers is not None:
                raise ValidationError("Unconscious answers require rated answers")
            selections = [
                {"question_id": a.question_id, "color": a.selected_color} for a in request.answers
            ]
            result = assembler.submit_selections(selections, user_id=request.user_id)
    except ValidationError as e:
        logger.warning(f"Invalid quiz submission: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception(f"Unexpected error during quiz submission: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")

    return SubmissionResponse(
        id=result.id,
        scores=result.scores,
        unconscious_scores=result.unconscious_scores,
        dominant_color=result.dominant_color,
        secondary_color=result.secondary_color,
        personality_type=result.personality_type,
    )


@router.get("/quiz/results/{result_id}", response_model=ResultResponse)
async def get_result(result_id: int, assembler: ResultAssembler = Depends(get_assembler)):
    return _to_result_response(_get_or_404(assembler, result_id))


@router.get("/quiz/results/{result_id}/dynamics", response_model=PersonaDynamics)
async def get_result_dynamics(
    result_id: int,
    unconscious: bool = False,
    assembler: ResultAssembler = Depends(get_assembler),
):
    result = _get_or_404(assembler, result_id)
    try:
        return ResultAssembler.dynamics_for(result, unconscious=unconscious)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/quiz/results/{result_id}", status_code=204)
async def delete_result(result_id: int, storage: ResultStorage = Depends(get_storage)):
    if not storage.delete_result(result_id):
        raise HTTPException(status_code=404, detail=f"Quiz result {result_id} not found")
    logger.info(f"Deleted quiz result {result_id}")
    return Response(status_code=204)


@router.get("/users/{user_id}/results", response_model=List[ResultResponse])
async def list_user_results(user_id: int, storage: ResultStorage = Depends(get_storage)):
    return [_to_result_response(r) for r in storage.get_results_by_user(user_id)]


@router.post("/comparisons", response_model=ResultComparison)
async def create_comparison(request: ComparisonRequest, assembler: ResultAssembler = Depends(get_assembler)):
    result_a = _get_or_404(assembler, request.result_a_id)
    result_b = _get_or_404(assembler, request.result_b_id)
    try:
        return compare_results(result_a, result_b)
    except ComparisonError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/catalog/colors")
async def list_colors():
    return list_color_profiles()


@router.get("/catalog/personalities/{personality_type}")
async def get_personality(personality_type: PersonalityType) -> Dict[str, Any]:
    profile = get_personality_profile(personality_type)
    return {"name": personality_type.value, **profile}
