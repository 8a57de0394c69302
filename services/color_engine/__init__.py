from .classifier import classify_personality, classify_scores, resolve_dominance
from .comparison import compare_results
from .dynamics import calculate_persona_dynamics
from .engine import ResultAssembler, ResultStorage
from .models import (
    COLOR_ORDER,
    Answer,
    ColorType,
    ComparisonError,
    DegenerateInputWarning,
    PersonaDynamics,
    PersonalityType,
    QuizResult,
    ResultDraft,
    ResultNotFoundError,
    SelectionAnswer,
    ValidationError,
)
from .scorer import calculate_selection_scores, calculate_weighted_scores, normalize_scores

__all__ = [
    "COLOR_ORDER",
    "Answer",
    "ColorType",
    "ComparisonError",
    "DegenerateInputWarning",
    "PersonaDynamics",
    "PersonalityType",
    "QuizResult",
    "ResultAssembler",
    "ResultDraft",
    "ResultNotFoundError",
    "ResultStorage",
    "SelectionAnswer",
    "ValidationError",
    "calculate_persona_dynamics",
    "calculate_selection_scores",
    "calculate_weighted_scores",
    "classify_personality",
    "classify_scores",
    "compare_results",
    "normalize_scores",
    "resolve_dominance",
]
