from .config import Settings, get_settings
from .persistence import InMemoryFeedbackRepository, SQLFeedbackRepository, build_engine

__all__ = [
    "Settings",
    "get_settings",
    "InMemoryFeedbackRepository",
    "SQLFeedbackRepository",
    "build_engine",
]
