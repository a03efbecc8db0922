from typing import List, Optional
import logging
import uuid
from dataclasses import replace

from sqlalchemy import BigInteger, Column
from sqlalchemy.engine import Engine
from sqlmodel import Field, SQLModel, func, select

from feedback_tracker.domain import IFeedbackRepository, Feedback, FeedbackPriority, FeedbackStatus
from feedback_tracker.infrastructure.persistence.database import init_db, session_scope


logger = logging.getLogger(__name__)


class FeedbackRow(SQLModel, table=True):
    """Feedback table row."""

    __tablename__ = "feedback"

    id: str = Field(primary_key=True, max_length=36)
    title: str = Field(max_length=140)
    description: str = Field(max_length=2000)
    category: str = Field(max_length=64)
    status: str = Field(default=FeedbackStatus.OPEN.value, max_length=20)
    priority: str = Field(default=FeedbackPriority.MEDIUM.value, max_length=20)
    created_at: int = Field(sa_column=Column(BigInteger, nullable=False))

    def to_entity(self) -> Feedback:
        return Feedback(
            id=self.id,
            title=self.title,
            description=self.description,
            category=self.category,
            status=FeedbackStatus(self.status),
            priority=FeedbackPriority(self.priority),
            created_at=self.created_at,
        )

    def copy_from(self, feedback: Feedback) -> None:
        self.title = feedback.title
        self.description = feedback.description
        self.category = feedback.category
        self.status = feedback.status.value
        self.priority = feedback.priority.value
        self.created_at = feedback.created_at


class SQLFeedbackRepository(IFeedbackRepository):
    """SQLModel-backed implementation of feedback repository.

    Every call runs in its own session and transaction.
    """

    def __init__(self, engine: Engine, create_tables: bool = True):
        self._engine = engine
        if create_tables:
            init_db(engine)

    def count(self) -> int:
        with session_scope(self._engine) as session:
            return session.exec(select(func.count()).select_from(FeedbackRow)).one()

    def save(self, feedback: Feedback) -> Feedback:
        """Insert new feedback or overwrite the row with the same id."""
        feedback_id = feedback.id or str(uuid.uuid4())
        with session_scope(self._engine) as session:
            row = session.get(FeedbackRow, feedback_id) if feedback.id else None
            if row is None:
                row = FeedbackRow(id=feedback_id, created_at=feedback.created_at)
            row.copy_from(feedback)
            session.add(row)
        logger.debug(f"Feedback persisted: {feedback_id}")
        return replace(feedback, id=feedback_id)

    def find_by_id(self, feedback_id: str) -> Optional[Feedback]:
        with session_scope(self._engine) as session:
            row = session.get(FeedbackRow, feedback_id)
            return row.to_entity() if row is not None else None

    def find_all(self) -> List[Feedback]:
        with session_scope(self._engine) as session:
            return [row.to_entity() for row in session.exec(select(FeedbackRow)).all()]

    def exists_by_id(self, feedback_id: str) -> bool:
        with session_scope(self._engine) as session:
            return session.get(FeedbackRow, feedback_id) is not None

    def delete_by_id(self, feedback_id: str) -> None:
        with session_scope(self._engine) as session:
            row = session.get(FeedbackRow, feedback_id)
            if row is not None:
                session.delete(row)
