from typing import Generator

from feedback_tracker.application import (
    ListFeedbackUseCase,
    CreateFeedbackUseCase,
    UpdateFeedbackUseCase,
    UpdateFeedbackStatusUseCase,
    DeleteFeedbackUseCase,
)
from feedback_tracker.container import Container


_container: Container | None = None


def set_container(container: Container) -> None:
    """Set the global container for dependency injection."""
    global _container
    _container = container


def get_container() -> Container:
    """Get the global container."""
    if _container is None:
        raise RuntimeError("Container not initialized. Call set_container() first.")
    return _container


def get_list_use_case() -> Generator[ListFeedbackUseCase, None, None]:
    """Dependency provider for ListFeedbackUseCase."""
    container = get_container()
    yield container.list_feedback_use_case


def get_create_use_case() -> Generator[CreateFeedbackUseCase, None, None]:
    """Dependency provider for CreateFeedbackUseCase."""
    container = get_container()
    yield container.create_feedback_use_case


def get_update_use_case() -> Generator[UpdateFeedbackUseCase, None, None]:
    """Dependency provider for UpdateFeedbackUseCase."""
    container = get_container()
    yield container.update_feedback_use_case


def get_status_use_case() -> Generator[UpdateFeedbackStatusUseCase, None, None]:
    """Dependency provider for UpdateFeedbackStatusUseCase."""
    container = get_container()
    yield container.update_status_use_case


def get_delete_use_case() -> Generator[DeleteFeedbackUseCase, None, None]:
    """Dependency provider for DeleteFeedbackUseCase."""
    container = get_container()
    yield container.delete_feedback_use_case
