from abc import ABC, abstractmethod
from typing import List, Optional
from feedback_tracker.domain.entities import Feedback


class IFeedbackRepository(ABC):
    """Interface for feedback persistence."""

    @abstractmethod
    def count(self) -> int:
        """Return the total number of stored feedback items."""
        pass

    @abstractmethod
    def save(self, feedback: Feedback) -> Feedback:
        """Insert feedback without an id, otherwise overwrite the stored row.

        Returns:
            The persisted feedback, carrying its assigned id.
        """
        pass

    @abstractmethod
    def find_by_id(self, feedback_id: str) -> Optional[Feedback]:
        """Get feedback by id."""
        pass

    @abstractmethod
    def find_all(self) -> List[Feedback]:
        """Get all feedback entries in no particular order."""
        pass

    @abstractmethod
    def exists_by_id(self, feedback_id: str) -> bool:
        """Check whether feedback with the given id exists."""
        pass

    @abstractmethod
    def delete_by_id(self, feedback_id: str) -> None:
        """Delete feedback by id. Unknown ids are ignored."""
        pass
