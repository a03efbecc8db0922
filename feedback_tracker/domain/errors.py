from typing import Dict, List


class FeedbackError(Exception):
    """Base class for feedback domain errors."""


class ValidationError(FeedbackError):
    """Raised when feedback input violates a field constraint."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        details = "; ".join(f"{name}: {message}" for name, message in self.errors.items())
        super().__init__(f"Invalid feedback: {details}")

    @property
    def fields(self) -> List[str]:
        """Names of the offending fields."""
        return list(self.errors)


class NotFoundError(FeedbackError):
    """Raised when no feedback exists for the requested id."""

    def __init__(self, feedback_id: str):
        self.feedback_id = feedback_id
        super().__init__(f"Feedback {feedback_id} not found")
