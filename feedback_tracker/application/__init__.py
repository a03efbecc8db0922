from .use_cases import (
    ListFeedbackUseCase,
    CreateFeedbackUseCase,
    UpdateFeedbackUseCase,
    UpdateFeedbackStatusUseCase,
    DeleteFeedbackUseCase,
    SeedFeedbackUseCase,
    SEED_FEEDBACK,
)

__all__ = [
    "ListFeedbackUseCase",
    "CreateFeedbackUseCase",
    "UpdateFeedbackUseCase",
    "UpdateFeedbackStatusUseCase",
    "DeleteFeedbackUseCase",
    "SeedFeedbackUseCase",
    "SEED_FEEDBACK",
]
