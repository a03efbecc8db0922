from .manage_feedback import (
    ListFeedbackUseCase,
    CreateFeedbackUseCase,
    UpdateFeedbackUseCase,
    UpdateFeedbackStatusUseCase,
    DeleteFeedbackUseCase,
)
from .seed_feedback import SeedFeedbackUseCase, SEED_FEEDBACK

__all__ = [
    "ListFeedbackUseCase",
    "CreateFeedbackUseCase",
    "UpdateFeedbackUseCase",
    "UpdateFeedbackStatusUseCase",
    "DeleteFeedbackUseCase",
    "SeedFeedbackUseCase",
    "SEED_FEEDBACK",
]
