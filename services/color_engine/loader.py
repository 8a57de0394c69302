import yaml
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Tuple, Union

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from .models import COLOR_ORDER, ColorType

DEFAULT_QUESTIONS_PATH = Path(__file__).parent / "assets" / "quiz_questions.yml"


class QuestionBankError(ValueError):
    """Custom exception for question bank errors not covered by Pydantic."""
    pass


class QuizOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    color: ColorType


class QuizQuestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    text: str
    options: Tuple[QuizOption, ...]


class QuestionRepository:
    """
    Read-only arena of quiz questions addressed by integer id.
    Built once at startup; there are no writers.
    """
    def __init__(self, questions: List[QuizQuestion]):
        self._questions = MappingProxyType({q.id: q for q in questions})

    def get(self, question_id: int) -> QuizQuestion:
        try:
            return self._questions[question_id]
        except KeyError:
            raise QuestionBankError(f"Unknown question id: {question_id}") from None

    def all(self) -> List[QuizQuestion]:
        return [self._questions[qid] for qid in sorted(self._questions)]

    def __contains__(self, question_id: object) -> bool:
        return question_id in self._questions

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[QuizQuestion]:
        return iter(self.all())


def load_question_data(data: Any) -> QuestionRepository:
    """
    Validates raw question data (a list of question dicts, or a dict with a
    'questions' key) and builds the repository.
    """
    if isinstance(data, dict):
        data = data.get("questions")
    if not isinstance(data, list) or not data:
        raise QuestionBankError("Question bank must contain a non-empty 'questions' list")

    try:
        questions = [QuizQuestion.model_validate(item) for item in data]
    except PydanticValidationError as e:
        raise QuestionBankError(f"Invalid question definition: {e}") from e

    question_ids = set()
    for question in questions:
        if question.id in question_ids:
            raise QuestionBankError(f"Duplicate question ID found: {question.id}")
        question_ids.add(question.id)

        colors = [option.color for option in question.options]
        if len(colors) != len(COLOR_ORDER) or set(colors) != set(COLOR_ORDER):
            raise QuestionBankError(
                f"Question {question.id} must offer each of the 4 colors exactly once"
            )

    return QuestionRepository(questions)


def load_questions_from_file(file_path: Union[str, Path] = DEFAULT_QUESTIONS_PATH) -> QuestionRepository:
    """
    Loads the question bank from a YAML file, validates it,
    and returns a QuestionRepository.
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise QuestionBankError(f"File not found: {file_path}")
    except yaml.YAMLError as e:
        raise QuestionBankError(f"Error parsing YAML file {file_path}: {e}")

    if data is None:
        raise QuestionBankError(f"YAML file is empty or invalid: {file_path}")

    return load_question_data(data)


def question_to_dict(question: QuizQuestion) -> Dict[str, Any]:
    return question.model_dump(mode="json")
