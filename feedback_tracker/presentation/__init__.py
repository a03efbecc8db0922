from .api import router
from .schemas import (
    FeedbackDTO,
    FeedbackRequestDTO,
    StatusRequestDTO,
    HealthStatusDTO,
)
from .dependencies import set_container, get_container

__all__ = [
    "router",
    "FeedbackDTO",
    "FeedbackRequestDTO",
    "StatusRequestDTO",
    "HealthStatusDTO",
    "set_container",
    "get_container",
]
