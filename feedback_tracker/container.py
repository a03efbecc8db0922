"""
Dependency Injection Container

This module provides a simple DI container that wires together all the
application dependencies following the Clean Architecture pattern.
"""

from feedback_tracker.domain import IFeedbackRepository, MillisClock
from feedback_tracker.infrastructure import (
    Settings,
    get_settings,
    InMemoryFeedbackRepository,
    SQLFeedbackRepository,
    build_engine,
)
from feedback_tracker.application import (
    ListFeedbackUseCase,
    CreateFeedbackUseCase,
    UpdateFeedbackUseCase,
    UpdateFeedbackStatusUseCase,
    DeleteFeedbackUseCase,
    SeedFeedbackUseCase,
)


class Container:
    """
    Dependency Injection Container.

    Manages the lifecycle and wiring of all application dependencies.
    Following the Composition Root pattern, all dependencies are
    created and wired here.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        feedback_repository: IFeedbackRepository | None = None,
        clock: MillisClock | None = None,
    ):
        self._settings = settings or get_settings()

        # Infrastructure layer
        self._feedback_repository: IFeedbackRepository | None = feedback_repository
        self._clock: MillisClock = clock or MillisClock()

        # Application layer - use cases
        self._list_feedback_use_case: ListFeedbackUseCase | None = None
        self._create_feedback_use_case: CreateFeedbackUseCase | None = None
        self._update_feedback_use_case: UpdateFeedbackUseCase | None = None
        self._update_status_use_case: UpdateFeedbackStatusUseCase | None = None
        self._delete_feedback_use_case: DeleteFeedbackUseCase | None = None
        self._seed_feedback_use_case: SeedFeedbackUseCase | None = None

    @property
    def settings(self) -> Settings:
        """Get application settings."""
        return self._settings

    @property
    def clock(self) -> MillisClock:
        return self._clock

    @property
    def feedback_repository(self) -> IFeedbackRepository:
        """Get or create feedback repository instance."""
        if self._feedback_repository is None:
            backend = self._settings.storage_backend
            if backend == "memory":
                self._feedback_repository = InMemoryFeedbackRepository()
            elif backend == "sql":
                engine = build_engine(
                    self._settings.database_url,
                    echo=self._settings.database_echo,
                )
                self._feedback_repository = SQLFeedbackRepository(engine)
            else:
                raise ValueError(f"Unknown storage backend: {backend!r}. Use 'sql' or 'memory'.")
        return self._feedback_repository

    @property
    def list_feedback_use_case(self) -> ListFeedbackUseCase:
        """Get or create ListFeedbackUseCase instance."""
        if self._list_feedback_use_case is None:
            self._list_feedback_use_case = ListFeedbackUseCase(
                feedback_repository=self.feedback_repository,
            )
        return self._list_feedback_use_case

    @property
    def create_feedback_use_case(self) -> CreateFeedbackUseCase:
        """Get or create CreateFeedbackUseCase instance."""
        if self._create_feedback_use_case is None:
            self._create_feedback_use_case = CreateFeedbackUseCase(
                feedback_repository=self.feedback_repository,
                clock=self._clock,
            )
        return self._create_feedback_use_case

    @property
    def update_feedback_use_case(self) -> UpdateFeedbackUseCase:
        """Get or create UpdateFeedbackUseCase instance."""
        if self._update_feedback_use_case is None:
            self._update_feedback_use_case = UpdateFeedbackUseCase(
                feedback_repository=self.feedback_repository,
            )
        return self._update_feedback_use_case

    @property
    def update_status_use_case(self) -> UpdateFeedbackStatusUseCase:
        """Get or create UpdateFeedbackStatusUseCase instance."""
        if self._update_status_use_case is None:
            self._update_status_use_case = UpdateFeedbackStatusUseCase(
                feedback_repository=self.feedback_repository,
            )
        return self._update_status_use_case

    @property
    def delete_feedback_use_case(self) -> DeleteFeedbackUseCase:
        """Get or create DeleteFeedbackUseCase instance."""
        if self._delete_feedback_use_case is None:
            self._delete_feedback_use_case = DeleteFeedbackUseCase(
                feedback_repository=self.feedback_repository,
            )
        return self._delete_feedback_use_case

    @property
    def seed_feedback_use_case(self) -> SeedFeedbackUseCase:
        """Get or create SeedFeedbackUseCase instance."""
        if self._seed_feedback_use_case is None:
            self._seed_feedback_use_case = SeedFeedbackUseCase(
                feedback_repository=self.feedback_repository,
                clock=self._clock,
            )
        return self._seed_feedback_use_case


def create_container(
    settings: Settings | None = None,
    feedback_repository: IFeedbackRepository | None = None,
) -> Container:
    """Factory function to create a new container instance."""
    return Container(settings, feedback_repository=feedback_repository)
