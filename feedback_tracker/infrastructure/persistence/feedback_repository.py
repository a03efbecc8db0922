from typing import Dict, List, Optional
import logging
import threading
import uuid
from dataclasses import replace

from feedback_tracker.domain import IFeedbackRepository, Feedback


logger = logging.getLogger(__name__)


class InMemoryFeedbackRepository(IFeedbackRepository):
    """In-memory implementation of feedback repository."""

    def __init__(self):
        self._storage: Dict[str, Feedback] = {}
        self._lock = threading.Lock()

    def count(self) -> int:
        with self._lock:
            return len(self._storage)

    def save(self, feedback: Feedback) -> Feedback:
        """Save feedback entry to in-memory storage."""
        stored = replace(feedback)
        if stored.id is None:
            stored.id = str(uuid.uuid4())
        with self._lock:
            created = stored.id not in self._storage
            self._storage[stored.id] = stored
        logger.debug(f"Feedback {'inserted' if created else 'overwritten'}: {stored.id}")
        return replace(stored)

    def find_by_id(self, feedback_id: str) -> Optional[Feedback]:
        """Get feedback by ID."""
        with self._lock:
            feedback = self._storage.get(feedback_id)
        return replace(feedback) if feedback is not None else None

    def find_all(self) -> List[Feedback]:
        """Get all feedback entries."""
        with self._lock:
            return [replace(feedback) for feedback in self._storage.values()]

    def exists_by_id(self, feedback_id: str) -> bool:
        with self._lock:
            return feedback_id in self._storage

    def delete_by_id(self, feedback_id: str) -> None:
        with self._lock:
            self._storage.pop(feedback_id, None)
