from .feedback_repository import IFeedbackRepository

__all__ = [
    "IFeedbackRepository",
]
