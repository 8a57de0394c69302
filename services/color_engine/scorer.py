# services/color_engine/scorer.py
# Turns quiz answers into raw color totals and normalized percentages.

import logging
import math
import warnings
from collections import defaultdict
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple, Type, TypeVar, Union

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from .models import (
    COLOR_ORDER,
    Answer,
    ColorType,
    DegenerateInputWarning,
    ScoreVector,
    SelectionAnswer,
    ValidationError,
)

logger = logging.getLogger(__name__)

# --- Constants ---

LEAST_LABEL = "L"
MOST_LABEL = "M"
INTERMEDIATE_LABELS = ("1", "2", "3", "4", "5")
RATING_LABELS = (LEAST_LABEL,) + INTERMEDIATE_LABELS + (MOST_LABEL,)

RATING_WEIGHTS: Dict[str, int] = {LEAST_LABEL: 0, MOST_LABEL: 6}
RATING_WEIGHTS.update({label: int(label) for label in INTERMEDIATE_LABELS})

_M = TypeVar("_M", bound=BaseModel)


def round_half_up(value: float) -> int:
    """Rounds .5 away from zero for non-negative input (Python's round() would use banker's rounding)."""
    return int(math.floor(value + 0.5))


def empty_vector() -> ScoreVector:
    return {color: 0 for color in COLOR_ORDER}


def _coerce(items: Iterable[Union[_M, Mapping[str, Any]]], model: Type[_M]) -> List[_M]:
    coerced = []
    for item in items:
        if isinstance(item, model):
            coerced.append(item)
            continue
        try:
            coerced.append(model.model_validate(item))
        except PydanticValidationError as e:
            raise ValidationError(f"Malformed answer {item!r}: {e.errors()[0]['msg']}") from e
    return coerced


def rating_weight(label: str) -> int:
    """Maps a rating label (exactly L, 1-5 or M) to its weight on the 0-6 scale."""
    try:
        return RATING_WEIGHTS[label]
    except KeyError:
        raise ValidationError(
            f"Unknown rating label '{label}'. Valid labels: {list(RATING_LABELS)}"
        ) from None


# --- Validation ---

def _validate_question(question_id: int, answers: Sequence[Answer]) -> None:
    for answer in answers:
        rating_weight(answer.rating)

    colors = [answer.color for answer in answers]
    if len(colors) != len(COLOR_ORDER) or set(colors) != set(COLOR_ORDER):
        raise ValidationError(
            f"Question {question_id} must rate each of the 4 colors exactly once; "
            f"got {[c.value for c in colors]}"
        )

    labels = [answer.rating for answer in answers]
    for required in (LEAST_LABEL, MOST_LABEL):
        count = labels.count(required)
        if count == 0:
            raise ValidationError(f"Question {question_id} is missing a '{required}' rating")
        if count > 1:
            raise ValidationError(f"Question {question_id} has more than one '{required}' rating")

    intermediate = [label for label in labels if label in INTERMEDIATE_LABELS]
    if len(intermediate) != len(set(intermediate)):
        raise ValidationError(
            f"Question {question_id} repeats an intermediate rating: {sorted(intermediate)}"
        )


def group_by_question(answers: Iterable[Answer]) -> Dict[int, List[Answer]]:
    """Groups answers by question id, keeping first-seen question order."""
    grouped: Dict[int, List[Answer]] = defaultdict(list)
    for answer in answers:
        grouped[answer.question_id].append(answer)
    return dict(grouped)


def validate_answers(answers: Iterable[Union[Answer, Mapping[str, Any]]]) -> List[Answer]:
    """
    Validates a rated answer set and returns it as Answer models.

    Raises:
        ValidationError: If the set is empty, a question does not rate all four
            colors once, a rating label is unknown, L or M is missing or
            repeated, or an intermediate rating is used twice in one question.
    """
    parsed = _coerce(answers, Answer)
    if not parsed:
        raise ValidationError("No answers submitted")

    for question_id, question_answers in group_by_question(parsed).items():
        _validate_question(question_id, question_answers)
    return parsed


def validate_selections(selections: Iterable[Union[SelectionAnswer, Mapping[str, Any]]]) -> List[SelectionAnswer]:
    parsed = _coerce(selections, SelectionAnswer)
    if not parsed:
        raise ValidationError("No answers submitted")
    return parsed


# --- Scoring Functions ---

def calculate_raw_scores(answers: Iterable[Union[Answer, Mapping[str, Any]]]) -> ScoreVector:
    """Sums rating weights per color across all questions."""
    raw = empty_vector()
    for answer in validate_answers(answers):
        raw[answer.color] += rating_weight(answer.rating)
    return raw


def normalize_scores(raw_scores: Mapping[ColorType, float]) -> ScoreVector:
    """
    Converts raw totals into rounded percentages of the grand total.

    Each color is rounded independently, so the result may drift from 100 by
    up to one point per color. A zero total is degenerate: raw values are
    returned unchanged (as integers) and a DegenerateInputWarning is issued.
    """
    raw = {color: raw_scores.get(color, 0) for color in COLOR_ORDER}
    total = sum(raw.values())

    if total == 0:
        logger.warning("All raw color scores are zero; using raw values as percentages.")
        warnings.warn(
            "All raw color scores are zero; using raw values as percentages.",
            DegenerateInputWarning,
            stacklevel=2,
        )
        return {color: round_half_up(value) for color, value in raw.items()}

    return {color: round_half_up(value / total * 100) for color, value in raw.items()}


def calculate_weighted_scores(
    answers: Iterable[Union[Answer, Mapping[str, Any]]]
) -> Tuple[ScoreVector, ScoreVector]:
    """Returns (raw totals, percentages) for a rated answer set."""
    raw = calculate_raw_scores(answers)
    percentages = normalize_scores(raw)
    logger.debug(f"Weighted scores raw={raw} percentages={percentages}")
    return raw, percentages


def calculate_selection_scores(
    selections: Iterable[Union[SelectionAnswer, Mapping[str, Any]]]
) -> Tuple[ScoreVector, ScoreVector]:
    """
    Legacy single-select scoring: one color pick per question.

    Returns (counts, percentages) where percentage = round(count / answers * 100).
    """
    parsed = validate_selections(selections)

    counts = empty_vector()
    for selection in parsed:
        counts[selection.color] += 1

    total = len(parsed)
    percentages = {color: round_half_up(count / total * 100) for color, count in counts.items()}
    logger.debug(f"Selection scores counts={counts} percentages={percentages}")
    return counts, percentages
