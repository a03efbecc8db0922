from .feedback_repository import InMemoryFeedbackRepository
from .sql_feedback_repository import SQLFeedbackRepository, FeedbackRow
from .database import build_engine, init_db, session_scope

__all__ = [
    "InMemoryFeedbackRepository",
    "SQLFeedbackRepository",
    "FeedbackRow",
    "build_engine",
    "init_db",
    "session_scope",
]
