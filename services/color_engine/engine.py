import logging
from typing import Any, Iterable, List, Mapping, Optional, Protocol, Sequence, Union

from .classifier import classify_scores
from .dynamics import calculate_persona_dynamics
from .loader import QuestionRepository
from .models import (
    Answer,
    PersonaDynamics,
    QuizResult,
    ResultDraft,
    ResultNotFoundError,
    SelectionAnswer,
    ValidationError,
)
from .scorer import (
    calculate_selection_scores,
    calculate_weighted_scores,
    validate_answers,
    validate_selections,
)

logger = logging.getLogger(__name__)

AnswerInput = Iterable[Union[Answer, Mapping[str, Any]]]
SelectionInput = Iterable[Union[SelectionAnswer, Mapping[str, Any]]]


class ResultStorage(Protocol):
    """Persistence collaborator. Ids and timestamps are assigned here, not by the engine."""

    def create_result(self, draft: ResultDraft) -> QuizResult: ...

    def get_result(self, result_id: int) -> Optional[QuizResult]: ...

    def get_results_by_user(self, user_id: int) -> List[QuizResult]: ...

    def delete_result(self, result_id: int) -> bool: ...


class ResultAssembler:
    """
    Runs a submission through scoring, dominance resolution and classification,
    and hands the finished draft to storage.

    When a question repository is given, every answer must address a question
    in it.
    """
    def __init__(
        self,
        storage: Optional[ResultStorage] = None,
        questions: Optional[QuestionRepository] = None,
    ):
        self.storage = storage
        self.questions = questions

    def _check_known_questions(self, answers: Sequence[Union[Answer, SelectionAnswer]]) -> None:
        if self.questions is None:
            return
        unknown = sorted({a.question_id for a in answers if a.question_id not in self.questions})
        if unknown:
            raise ValidationError(f"Unknown question id(s): {unknown}")

    def assemble(
        self,
        answers: AnswerInput,
        unconscious_answers: Optional[AnswerInput] = None,
        user_id: Optional[int] = None,
    ) -> ResultDraft:
        """
        Builds a result from rated answers without persisting it.

        Args:
            answers: Rated answers, four per question (one per color).
            unconscious_answers: Optional second answer set for dual-profile
                assessments, scored the same way.
            user_id: Owner of the result, or None for anonymous submissions.

        Raises:
            ValidationError: If either answer set is empty or malformed, or
                addresses a question that is not in the repository.
        """
        parsed = validate_answers(answers)
        self._check_known_questions(parsed)
        _, scores = calculate_weighted_scores(parsed)

        unconscious_scores = None
        if unconscious_answers is not None:
            parsed_unconscious = validate_answers(unconscious_answers)
            self._check_known_questions(parsed_unconscious)
            _, unconscious_scores = calculate_weighted_scores(parsed_unconscious)

        dominant, secondary, personality_type = classify_scores(scores)
        return ResultDraft(
            user_id=user_id,
            scores=scores,
            unconscious_scores=unconscious_scores,
            dominant_color=dominant,
            secondary_color=secondary,
            personality_type=personality_type,
        )

    def assemble_selections(self, selections: SelectionInput, user_id: Optional[int] = None) -> ResultDraft:
        """Builds a result from legacy single-select answers."""
        parsed = validate_selections(selections)
        self._check_known_questions(parsed)
        _, scores = calculate_selection_scores(parsed)
        dominant, secondary, personality_type = classify_scores(scores)
        return ResultDraft(
            user_id=user_id,
            scores=scores,
            dominant_color=dominant,
            secondary_color=secondary,
            personality_type=personality_type,
        )

    def save(self, draft: ResultDraft) -> QuizResult:
        if self.storage is None:
            raise RuntimeError("ResultAssembler has no storage configured")
        result = self.storage.create_result(draft)
        logger.info(
            f"Stored quiz result {result.id} for user {result.user_id}: "
            f"{result.personality_type.value} ({result.dominant_color.value}/{result.secondary_color.value})"
        )
        return result

    def fetch(self, result_id: int) -> QuizResult:
        if self.storage is None:
            raise RuntimeError("ResultAssembler has no storage configured")
        result = self.storage.get_result(result_id)
        if result is None:
            raise ResultNotFoundError(f"Quiz result {result_id} not found")
        return result

    def submit(
        self,
        answers: AnswerInput,
        unconscious_answers: Optional[AnswerInput] = None,
        user_id: Optional[int] = None,
    ) -> QuizResult:
        """Assembles and persists a rated submission. Nothing is stored if validation fails."""
        draft = self.assemble(answers, unconscious_answers=unconscious_answers, user_id=user_id)
        return self.save(draft)

    def submit_selections(self, selections: SelectionInput, user_id: Optional[int] = None) -> QuizResult:
        return self.save(self.assemble_selections(selections, user_id=user_id))

    @staticmethod
    def dynamics_for(result: ResultDraft, unconscious: bool = False) -> PersonaDynamics:
        """Persona dynamics for a result's conscious (default) or unconscious scores."""
        if unconscious:
            if result.unconscious_scores is None:
                raise ValidationError("This result has no unconscious scores")
            return calculate_persona_dynamics(result.unconscious_scores)
        return calculate_persona_dynamics(result.scores)
