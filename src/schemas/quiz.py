from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from services.color_engine.models import ColorType, PersonalityType, ScoreVector


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class SubmittedAnswer(_CamelModel):
    question_id: int = Field(..., alias="questionId")
    selected_color: str = Field(..., alias="selectedColor")
    rating: Optional[str] = None  # L, 1-5 or M; absent for single-select submissions


class SubmissionRequest(_CamelModel):
    answers: List[SubmittedAnswer]
    unconscious_answers: Optional[List[SubmittedAnswer]] = Field(default=None, alias="unconsciousAnswers")
    user_id: Optional[int] = Field(default=None, alias="userId")


class SubmissionResponse(_CamelModel):
    id: int
    scores: ScoreVector
    unconscious_scores: Optional[ScoreVector] = Field(default=None, alias="unconsciousScores")
    dominant_color: ColorType = Field(..., alias="dominantColor")
    secondary_color: ColorType = Field(..., alias="secondaryColor")
    personality_type: PersonalityType = Field(..., alias="personalityType")


class ResultResponse(SubmissionResponse):
    user_id: Optional[int] = Field(default=None, alias="userId")
    created_at: datetime = Field(..., alias="createdAt")
    title: str


class ComparisonRequest(_CamelModel):
    result_a_id: int = Field(..., alias="resultAId")
    result_b_id: int = Field(..., alias="resultBId")
