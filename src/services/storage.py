import logging
import threading
from datetime import datetime, timezone
from typing import Dict, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from services.color_engine.models import COLOR_ORDER, ColorType, QuizResult, ResultDraft
from src.db.models import QuizResultRecord

logger = logging.getLogger(__name__)

# Score column per color on QuizResultRecord.
SCORE_COLUMNS: Dict[ColorType, str] = {
    ColorType.FIERY_RED: "fiery_red_score",
    ColorType.SUNSHINE_YELLOW: "sunshine_yellow_score",
    ColorType.EARTH_GREEN: "earth_green_score",
    ColorType.COOL_BLUE: "cool_blue_score",
}


class InMemoryResultStorage:
    """Process-local result store with incrementing integer ids."""

    def __init__(self):
        self._results: Dict[int, QuizResult] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def create_result(self, draft: ResultDraft) -> QuizResult:
        with self._lock:
            result = QuizResult(
                id=self._next_id,
                created_at=datetime.now(timezone.utc),
                **draft.model_dump(),
            )
            self._results[result.id] = result
            self._next_id += 1
        logger.debug(f"Stored result {result.id} in memory")
        return result

    def get_result(self, result_id: int) -> Optional[QuizResult]:
        with self._lock:
            return self._results.get(result_id)

    def get_results_by_user(self, user_id: int) -> List[QuizResult]:
        with self._lock:
            return [r for r in self._results.values() if r.user_id == user_id]

    def delete_result(self, result_id: int) -> bool:
        with self._lock:
            return self._results.pop(result_id, None) is not None


def record_to_result(record: QuizResultRecord) -> QuizResult:
    created_at = record.created_at
    if created_at.tzinfo is None:
        # SQLite drops tz info on the way back
        created_at = created_at.replace(tzinfo=timezone.utc)
    return QuizResult(
        id=record.id,
        user_id=record.user_id,
        scores={color: getattr(record, SCORE_COLUMNS[color]) for color in COLOR_ORDER},
        unconscious_scores=record.unconscious_scores,
        dominant_color=record.dominant_color,
        secondary_color=record.secondary_color,
        personality_type=record.personality_type,
        created_at=created_at,
    )


class DatabaseResultStorage:
    """SQLAlchemy-backed result store. One session per call."""

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    def create_result(self, draft: ResultDraft) -> QuizResult:
        record = QuizResultRecord(
            user_id=draft.user_id,
            unconscious_scores=(
                {color.value: value for color, value in draft.unconscious_scores.items()}
                if draft.unconscious_scores is not None else None
            ),
            dominant_color=draft.dominant_color.value,
            secondary_color=draft.secondary_color.value,
            personality_type=draft.personality_type.value,
            created_at=datetime.now(timezone.utc),
            **{SCORE_COLUMNS[color]: draft.scores[color] for color in COLOR_ORDER},
        )
        with self.session_factory() as session:
            try:
                session.add(record)
                session.commit()
                session.refresh(record)
            except Exception:
                session.rollback()
                logger.error("Failed to store quiz result", exc_info=True)
                raise
            return record_to_result(record)

    def get_result(self, result_id: int) -> Optional[QuizResult]:
        with self.session_factory() as session:
            record = session.get(QuizResultRecord, result_id)
            return record_to_result(record) if record is not None else None

    def get_results_by_user(self, user_id: int) -> List[QuizResult]:
        with self.session_factory() as session:
            stmt = (
                select(QuizResultRecord)
                .where(QuizResultRecord.user_id == user_id)
                .order_by(QuizResultRecord.created_at, QuizResultRecord.id)
            )
            return [record_to_result(record) for record in session.scalars(stmt)]

    def delete_result(self, result_id: int) -> bool:
        with self.session_factory() as session:
            record = session.get(QuizResultRecord, result_id)
            if record is None:
                return False
            session.delete(record)
            session.commit()
            return True
