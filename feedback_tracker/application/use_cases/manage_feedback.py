import logging
from typing import Callable, List

from feedback_tracker.domain import (
    IFeedbackRepository,
    Feedback,
    FeedbackPriority,
    FeedbackStatus,
    NotFoundError,
)


logger = logging.getLogger(__name__)


class ListFeedbackUseCase:
    """Use case for listing feedback, newest first."""

    def __init__(self, feedback_repository: IFeedbackRepository):
        self._feedback_repository = feedback_repository

    def execute(self) -> List[Feedback]:
        # sorted() is stable, so equal timestamps keep store order
        return sorted(
            self._feedback_repository.find_all(),
            key=lambda feedback: feedback.created_at,
            reverse=True,
        )


class CreateFeedbackUseCase:
    """Use case for submitting a new feedback item."""

    def __init__(
        self,
        feedback_repository: IFeedbackRepository,
        clock: Callable[[], int],
    ):
        self._feedback_repository = feedback_repository
        self._clock = clock

    def execute(
        self,
        title: str,
        description: str,
        category: str,
        priority: FeedbackPriority | str,
    ) -> Feedback:
        """
        Validate and persist a new feedback item.

        Args:
            title: Short summary, 1-140 characters.
            description: Details, 1-2000 characters.
            category: Free-form category, 1-64 characters.
            priority: LOW, MEDIUM or HIGH.

        Returns:
            The stored feedback with its generated id and OPEN status.

        Raises:
            ValidationError: If any field is missing, blank or too long.
        """
        feedback = Feedback.create(
            title=title,
            description=description,
            category=category,
            priority=priority,
            created_at=self._clock(),
        )
        saved = self._feedback_repository.save(feedback)

        logger.info(f"Feedback created: {saved.id} ({saved.priority.value})")
        return saved


class UpdateFeedbackUseCase:
    """Use case for editing title, description, category and priority."""

    def __init__(self, feedback_repository: IFeedbackRepository):
        self._feedback_repository = feedback_repository

    def execute(
        self,
        feedback_id: str,
        title: str,
        description: str,
        category: str,
        priority: FeedbackPriority | str,
    ) -> Feedback:
        """
        Overwrite the editable fields of an existing feedback item.

        Raises:
            NotFoundError: If no feedback has the given id.
            ValidationError: If any field is invalid. Nothing is saved.
        """
        feedback = self._feedback_repository.find_by_id(feedback_id)
        if feedback is None:
            logger.warning(f"Update requested for unknown feedback {feedback_id}")
            raise NotFoundError(feedback_id)

        feedback.apply_update(title, description, category, priority)
        saved = self._feedback_repository.save(feedback)

        logger.info(f"Feedback updated: {feedback_id}")
        return saved


class UpdateFeedbackStatusUseCase:
    """Use case for moving feedback to another status."""

    def __init__(self, feedback_repository: IFeedbackRepository):
        self._feedback_repository = feedback_repository

    def execute(self, feedback_id: str, status: FeedbackStatus | str) -> Feedback:
        """
        Change only the status of an existing feedback item.

        Raises:
            NotFoundError: If no feedback has the given id.
            ValidationError: If status is not a known member.
        """
        feedback = self._feedback_repository.find_by_id(feedback_id)
        if feedback is None:
            logger.warning(f"Status change requested for unknown feedback {feedback_id}")
            raise NotFoundError(feedback_id)

        previous = feedback.status
        feedback.change_status(status)
        saved = self._feedback_repository.save(feedback)

        logger.info(f"Feedback {feedback_id} status: {previous.value} -> {saved.status.value}")
        return saved


class DeleteFeedbackUseCase:
    """Use case for removing feedback."""

    def __init__(self, feedback_repository: IFeedbackRepository):
        self._feedback_repository = feedback_repository

    def execute(self, feedback_id: str) -> None:
        if not self._feedback_repository.exists_by_id(feedback_id):
            logger.warning(f"Delete requested for unknown feedback {feedback_id}")
            raise NotFoundError(feedback_id)

        self._feedback_repository.delete_by_id(feedback_id)
        logger.info(f"Feedback deleted: {feedback_id}")
