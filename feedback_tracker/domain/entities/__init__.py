from .feedback import (
    Feedback,
    FeedbackPriority,
    FeedbackStatus,
    MillisClock,
    validate_feedback_fields,
    parse_status,
    TITLE_MAX_LENGTH,
    DESCRIPTION_MAX_LENGTH,
    CATEGORY_MAX_LENGTH,
)

__all__ = [
    "Feedback",
    "FeedbackPriority",
    "FeedbackStatus",
    "MillisClock",
    "validate_feedback_fields",
    "parse_status",
    "TITLE_MAX_LENGTH",
    "DESCRIPTION_MAX_LENGTH",
    "CATEGORY_MAX_LENGTH",
]
