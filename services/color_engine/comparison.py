# services/color_engine/comparison.py
# Side-by-side comparison of two stored quiz results.

import logging
from typing import Mapping

from .models import COLOR_ORDER, ColorType, ComparisonError, QuizResult, ResultComparison, ScoreVector

logger = logging.getLogger(__name__)


def score_differences(scores_a: Mapping[ColorType, int], scores_b: Mapping[ColorType, int]) -> ScoreVector:
    """Per-color change from A to B (B minus A)."""
    return {color: scores_b.get(color, 0) - scores_a.get(color, 0) for color in COLOR_ORDER}


def primary_difference(differences: Mapping[ColorType, int]) -> ColorType:
    """
    The color whose score moved the most.

    A color only wins if its gap is strictly larger than every color after it
    in canonical order, so ties go to the later color (blue when all are equal).
    """
    for index, color in enumerate(COLOR_ORDER[:-1]):
        gap = abs(differences[color])
        if all(gap > abs(differences[other]) for other in COLOR_ORDER[index + 1:]):
            return color
    return COLOR_ORDER[-1]


def compare_results(result_a: QuizResult, result_b: QuizResult) -> ResultComparison:
    if result_a.id == result_b.id:
        raise ComparisonError("Please select two different reports to compare.")

    differences = score_differences(result_a.scores, result_b.scores)
    comparison = ResultComparison(
        result_a_id=result_a.id,
        result_b_id=result_b.id,
        differences=differences,
        primary_difference=primary_difference(differences),
        shared_dominant=result_a.dominant_color == result_b.dominant_color,
        same_personality=result_a.personality_type == result_b.personality_type,
    )
    logger.info(f"Compared results {result_a.id} and {result_b.id}: primary difference {comparison.primary_difference.value}")
    return comparison
