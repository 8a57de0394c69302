from datetime import datetime, timezone

from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    String,
)
from sqlalchemy.orm import declarative_base

# Define naming conventions for constraints and indexes
# https://alembic.sqlalchemy.org/en/latest/naming.html
convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "fk": "fk_%(table_name)s_%(column_0_name)s_%(referred_table_name)s",
    "pk": "pk_%(table_name)s",
}

metadata = MetaData(naming_convention=convention)
Base = declarative_base(metadata=metadata)


class QuizResultRecord(Base):
    __tablename__ = "quiz_results"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=True)
    fiery_red_score = Column(Integer, nullable=False)
    sunshine_yellow_score = Column(Integer, nullable=False)
    earth_green_score = Column(Integer, nullable=False)
    cool_blue_score = Column(Integer, nullable=False)
    unconscious_scores = Column(JSON, nullable=True)  # {color: percentage}
    dominant_color = Column(String(32), nullable=False)
    secondary_color = Column(String(32), nullable=False)
    personality_type = Column(String(32), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        Index("ix_quiz_results_user_id_created_at", "user_id", "created_at"),
    )
