import pytest

from services.color_engine.engine import ResultAssembler
from services.color_engine.loader import load_question_data
from services.color_engine.models import (
    COLOR_ORDER,
    ColorType,
    PersonalityType,
    QuizResult,
    ResultDraft,
    ResultNotFoundError,
    ValidationError,
)

RED = ColorType.FIERY_RED
YELLOW = ColorType.SUNSHINE_YELLOW
GREEN = ColorType.EARTH_GREEN
BLUE = ColorType.COOL_BLUE


def test_assemble_scenario(scenario_answers):
    draft = ResultAssembler().assemble(scenario_answers, user_id=7)

    assert isinstance(draft, ResultDraft)
    assert draft.user_id == 7
    assert draft.scores == {RED: 33, YELLOW: 20, GREEN: 28, BLUE: 20}
    assert draft.dominant_color == RED
    assert draft.secondary_color == GREEN
    assert draft.personality_type == PersonalityType.DIRECTOR
    assert draft.unconscious_scores is None


def test_assemble_is_deterministic(scenario_answers):
    assembler = ResultAssembler()
    assert assembler.assemble(scenario_answers) == assembler.assemble(scenario_answers)


def test_assemble_with_unconscious_answers(scenario_answers, rate_question):
    unconscious = rate_question(1, red="L", yellow="1", green="2", blue="M")
    draft = ResultAssembler().assemble(scenario_answers, unconscious_answers=unconscious)

    assert draft.unconscious_scores == {RED: 0, YELLOW: 11, GREEN: 22, BLUE: 67}
    # Classification only looks at the conscious scores
    assert draft.personality_type == PersonalityType.DIRECTOR


def test_invalid_unconscious_answers_rejected(scenario_answers):
    with pytest.raises(ValidationError):
        ResultAssembler().assemble(scenario_answers, unconscious_answers=[])


def test_submit_stores_result(assembler, memory_storage, scenario_answers):
    result = assembler.submit(scenario_answers, user_id=3)

    assert isinstance(result, QuizResult)
    assert result.id == 1
    assert result.user_id == 3
    assert memory_storage.get_result(1) == result


def test_submit_invalid_answers_stores_nothing(assembler, memory_storage, rate_question):
    """Test failed validation → ValidationError and no stored result"""
    with pytest.raises(ValidationError):
        assembler.submit(rate_question(1, red="M", yellow="M", green="L", blue="1"), user_id=3)
    with pytest.raises(ValidationError):
        assembler.submit([], user_id=3)

    assert memory_storage.get_results_by_user(3) == []
    assert memory_storage.get_result(1) is None


def test_submit_selections(assembler):
    selections = [
        {"question_id": 1, "color": "cool-blue"},
        {"question_id": 2, "color": "earth-green"},
        {"question_id": 3, "color": "cool-blue"},
    ]
    result = assembler.submit_selections(selections)

    assert result.scores == {RED: 0, YELLOW: 0, GREEN: 33, BLUE: 67}
    assert result.personality_type == PersonalityType.COORDINATOR
    assert result.unconscious_scores is None


def test_save_without_storage_raises(scenario_answers):
    assembler = ResultAssembler()
    draft = assembler.assemble(scenario_answers)
    with pytest.raises(RuntimeError):
        assembler.save(draft)


def test_fetch_missing_result_raises(assembler):
    with pytest.raises(ResultNotFoundError) as excinfo:
        assembler.fetch(99)
    assert "99" in str(excinfo.value)


def test_fetch_returns_stored_result(assembler, scenario_answers):
    stored = assembler.submit(scenario_answers)
    assert assembler.fetch(stored.id) == stored


def test_dynamics_for_conscious_and_unconscious(scenario_answers, rate_question):
    unconscious = rate_question(1, red="L", yellow="1", green="2", blue="M")
    draft = ResultAssembler().assemble(scenario_answers, unconscious_answers=unconscious)

    conscious = ResultAssembler.dynamics_for(draft)
    assert conscious.preference_flow.top_color == RED

    hidden = ResultAssembler.dynamics_for(draft, unconscious=True)
    assert hidden.preference_flow.top_color == BLUE
    assert hidden.preference_flow.bottom_color == RED


def test_dynamics_for_missing_unconscious_scores(scenario_answers):
    draft = ResultAssembler().assemble(scenario_answers)
    with pytest.raises(ValidationError):
        ResultAssembler.dynamics_for(draft, unconscious=True)


# --- Question bank checks ---

def _bank(*question_ids):
    return load_question_data([
        {
            "id": qid,
            "text": f"Question {qid}?",
            "options": [{"text": color.value, "color": color.value} for color in COLOR_ORDER],
        }
        for qid in question_ids
    ])


def test_unknown_question_id_rejected(memory_storage, rate_question):
    """Test rated answers for a question outside the bank → ValidationError, nothing stored"""
    assembler = ResultAssembler(memory_storage, questions=_bank(1, 2, 3))

    with pytest.raises(ValidationError) as excinfo:
        assembler.submit(rate_question(9999, red="M", yellow="3", green="L", blue="1"))
    assert "9999" in str(excinfo.value)
    assert memory_storage.get_result(1) is None


def test_unknown_unconscious_question_id_rejected(scenario_answers, rate_question):
    assembler = ResultAssembler(questions=_bank(1, 2, 3))
    with pytest.raises(ValidationError):
        assembler.assemble(
            scenario_answers,
            unconscious_answers=rate_question(40, red="L", yellow="1", green="2", blue="M"),
        )


def test_unknown_selection_question_id_rejected():
    assembler = ResultAssembler(questions=_bank(1, 2))
    selections = [
        {"question_id": -5, "color": "cool-blue"},
        {"question_id": -5, "color": "cool-blue"},
    ]
    with pytest.raises(ValidationError) as excinfo:
        assembler.assemble_selections(selections)
    assert "-5" in str(excinfo.value)


def test_known_question_ids_accepted(scenario_answers):
    draft = ResultAssembler(questions=_bank(1, 2, 3)).assemble(scenario_answers)
    assert draft.personality_type == PersonalityType.DIRECTOR


def test_score_vectors_coerce_color_keys():
    draft = ResultDraft(
        scores={"fiery-red": 40, "sunshine-yellow": 30, "earth-green": 20, "cool-blue": 10},
        dominant_color="fiery-red",
        secondary_color="sunshine-yellow",
        personality_type="Motivator",
    )
    assert draft.scores[RED] == 40
    assert all(isinstance(color, ColorType) for color in draft.scores)
