from .entities import (
    Feedback,
    FeedbackPriority,
    FeedbackStatus,
    MillisClock,
    validate_feedback_fields,
    parse_status,
)
from .errors import FeedbackError, ValidationError, NotFoundError
from .interfaces import IFeedbackRepository

__all__ = [
    "Feedback",
    "FeedbackPriority",
    "FeedbackStatus",
    "MillisClock",
    "validate_feedback_fields",
    "parse_status",
    "FeedbackError",
    "ValidationError",
    "NotFoundError",
    "IFeedbackRepository",
]
