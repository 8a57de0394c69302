from datetime import datetime, timezone

import pytest

from services.color_engine.comparison import compare_results, primary_difference, score_differences
from services.color_engine.formatters import format_date, format_report_title
from services.color_engine.models import COLOR_ORDER, ColorType, ComparisonError, PersonalityType, QuizResult

RED = ColorType.FIERY_RED
YELLOW = ColorType.SUNSHINE_YELLOW
GREEN = ColorType.EARTH_GREEN
BLUE = ColorType.COOL_BLUE


def _result(result_id, scores, dominant, secondary, personality_type):
    return QuizResult(
        id=result_id,
        scores=scores,
        dominant_color=dominant,
        secondary_color=secondary,
        personality_type=personality_type,
        created_at=datetime(2024, 3, 5, 14, 30, tzinfo=timezone.utc),
    )


def test_score_differences_are_b_minus_a():
    a = {RED: 33, YELLOW: 20, GREEN: 28, BLUE: 20}
    b = {RED: 10, YELLOW: 30, GREEN: 30, BLUE: 30}
    assert score_differences(a, b) == {RED: -23, YELLOW: 10, GREEN: 2, BLUE: 10}


def test_primary_difference_largest_change_wins():
    assert primary_difference({RED: -23, YELLOW: 10, GREEN: 2, BLUE: 10}) == RED


def test_primary_difference_tie_goes_to_later_color():
    assert primary_difference({RED: 10, YELLOW: -10, GREEN: 0, BLUE: 0}) == YELLOW
    assert primary_difference({RED: 0, YELLOW: 5, GREEN: 0, BLUE: -5}) == BLUE


def test_primary_difference_all_equal_is_blue():
    assert primary_difference({color: 0 for color in COLOR_ORDER}) == BLUE


def test_compare_results():
    a = _result(1, {RED: 33, YELLOW: 20, GREEN: 28, BLUE: 20}, RED, GREEN, PersonalityType.DIRECTOR)
    b = _result(2, {RED: 40, YELLOW: 35, GREEN: 15, BLUE: 10}, RED, YELLOW, PersonalityType.MOTIVATOR)

    comparison = compare_results(a, b)

    assert comparison.result_a_id == 1
    assert comparison.result_b_id == 2
    assert comparison.differences == {RED: 7, YELLOW: 15, GREEN: -13, BLUE: -10}
    assert comparison.primary_difference == YELLOW
    assert comparison.shared_dominant is True
    assert comparison.same_personality is False


def test_compare_same_report_rejected():
    a = _result(4, {RED: 25, YELLOW: 25, GREEN: 25, BLUE: 25}, RED, YELLOW, PersonalityType.MOTIVATOR)
    with pytest.raises(ComparisonError) as excinfo:
        compare_results(a, a)
    assert "two different reports" in str(excinfo.value)


def test_format_date_has_no_zero_padding():
    assert format_date(datetime(2024, 3, 5)) == "March 5, 2024"


def test_format_report_title():
    result = _result(12, {RED: 25, YELLOW: 25, GREEN: 25, BLUE: 25}, RED, YELLOW, PersonalityType.MOTIVATOR)
    assert format_report_title(result) == "Report #12 - March 5, 2024"
