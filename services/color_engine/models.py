from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ColorType(str, Enum):
    FIERY_RED = "fiery-red"
    SUNSHINE_YELLOW = "sunshine-yellow"
    EARTH_GREEN = "earth-green"
    COOL_BLUE = "cool-blue"


# Canonical order: used for output ordering and as the tie-break priority.
COLOR_ORDER: List[ColorType] = [
    ColorType.FIERY_RED,
    ColorType.SUNSHINE_YELLOW,
    ColorType.EARTH_GREEN,
    ColorType.COOL_BLUE,
]


class PersonalityType(str, Enum):
    DIRECTOR = "Director"
    INSPIRER = "Inspirer"
    SUPPORTER = "Supporter"
    OBSERVER = "Observer"
    REFORMER = "Reformer"
    MOTIVATOR = "Motivator"
    HELPER = "Helper"
    COORDINATOR = "Coordinator"


ScoreVector = Dict[ColorType, int]


class Answer(BaseModel):
    """One rated option of a question (weighted mode)."""
    model_config = ConfigDict(frozen=True)

    question_id: int
    color: ColorType
    rating: str  # L, 1-5 or M; checked by the scorer


class SelectionAnswer(BaseModel):
    """A plain color pick (legacy single-select mode)."""
    model_config = ConfigDict(frozen=True)

    question_id: int
    color: ColorType


class ResultDraft(BaseModel):
    """Everything the engine computes for a submission; id and timestamp are added by storage."""
    model_config = ConfigDict(frozen=True)

    user_id: Optional[int] = None
    scores: ScoreVector
    unconscious_scores: Optional[ScoreVector] = None
    dominant_color: ColorType
    secondary_color: ColorType
    personality_type: PersonalityType


class QuizResult(ResultDraft):
    id: int
    created_at: datetime


class PersonaScale(BaseModel):
    model_config = ConfigDict(frozen=True)

    values: Dict[ColorType, float]  # 0-6 point scale
    percentages: Dict[ColorType, int]  # 0-100 share of the 6 point scale


class PreferenceFlow(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: int = Field(..., ge=0, le=100)
    top_color: ColorType
    bottom_color: ColorType


class PersonaDynamics(BaseModel):
    model_config = ConfigDict(frozen=True)

    conscious: PersonaScale
    less_conscious: PersonaScale
    preference_flow: PreferenceFlow
    flow_scores: Dict[ColorType, int]  # signed, -100..100


class ResultComparison(BaseModel):
    model_config = ConfigDict(frozen=True)

    result_a_id: int
    result_b_id: int
    differences: ScoreVector  # result B minus result A
    primary_difference: ColorType
    shared_dominant: bool
    same_personality: bool


# Custom Error Classes
class ValidationError(ValueError):
    """Malformed or incomplete answer input. Callers map this to a 400 response."""
    pass


class DegenerateInputWarning(UserWarning):
    """All raw scores are zero; raw values are used as percentages."""
    pass


class ResultNotFoundError(LookupError):
    """Raised when a stored quiz result cannot be found."""
    pass


class ComparisonError(ValueError):
    """Raised when two results cannot be compared (e.g. the same report twice)."""
    pass
