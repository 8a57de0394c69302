import pytest

from services.color_engine.engine import ResultAssembler
from src.services.storage import InMemoryResultStorage


def _rate_question(question_id: int, **ratings: str) -> list:
    """
    Builds the four rated answers of one question.
    Keyword names are the short color names: red, yellow, green, blue.
    """
    colors = {
        "red": "fiery-red",
        "yellow": "sunshine-yellow",
        "green": "earth-green",
        "blue": "cool-blue",
    }
    return [
        {"question_id": question_id, "color": colors[short], "rating": rating}
        for short, rating in ratings.items()
    ]


@pytest.fixture
def scenario_answers() -> list:
    """Three rated questions: raw red=13, green=11, yellow=8, blue=8 (total 40)."""
    return (
        _rate_question(1, blue="L", green="M", yellow="2", red="4")
        + _rate_question(2, blue="3", green="5", yellow="L", red="M")
        + _rate_question(3, blue="5", green="L", yellow="M", red="3")
    )


@pytest.fixture
def rate_question():
    return _rate_question


@pytest.fixture
def memory_storage() -> InMemoryResultStorage:
    return InMemoryResultStorage()


@pytest.fixture
def assembler(memory_storage) -> ResultAssembler:
    return ResultAssembler(memory_storage)
