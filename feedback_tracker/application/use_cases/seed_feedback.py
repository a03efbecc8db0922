import logging
from typing import Callable, List, Tuple

from feedback_tracker.domain import IFeedbackRepository, Feedback, FeedbackPriority


logger = logging.getLogger(__name__)


SEED_FEEDBACK: List[Tuple[str, str, str, FeedbackPriority]] = [
    ("Add dark mode", "Support system-wide dark theme.", "UI", FeedbackPriority.HIGH),
    ("Export to CSV", "Allow exporting feedback table.", "Data", FeedbackPriority.MEDIUM),
    ("Keyboard shortcuts", "Create shortcuts for power users.", "UX", FeedbackPriority.LOW),
]


class SeedFeedbackUseCase:
    """Use case for populating an empty store with sample feedback."""

    def __init__(
        self,
        feedback_repository: IFeedbackRepository,
        clock: Callable[[], int],
    ):
        self._feedback_repository = feedback_repository
        self._clock = clock

    def execute(self) -> int:
        """
        Insert the sample feedback items if the store is empty.

        Returns:
            Number of inserted items, 0 when the store already had data.
        """
        existing = self._feedback_repository.count()
        if existing > 0:
            logger.info(f"Skipping seed, store already holds {existing} feedback items")
            return 0

        for title, description, category, priority in SEED_FEEDBACK:
            self._feedback_repository.save(
                Feedback.create(
                    title=title,
                    description=description,
                    category=category,
                    priority=priority,
                    created_at=self._clock(),
                )
            )

        logger.info(f"Seeded {len(SEED_FEEDBACK)} feedback items")
        return len(SEED_FEEDBACK)
