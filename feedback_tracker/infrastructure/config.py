import os
from dataclasses import dataclass, field


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass
class Settings:
    """Application configuration settings."""

    app_name: str = field(
        default_factory=lambda: os.getenv("APP_NAME", "Feedback Tracker")
    )
    cors_allowed_origin: str = field(
        default_factory=lambda: os.getenv("APP_CORS_ALLOWED_ORIGIN", "http://localhost:5173")
    )
    # "sql" or "memory"
    storage_backend: str = field(
        default_factory=lambda: os.getenv("FEEDBACK_STORAGE", "sql").lower()
    )
    database_url: str = field(
        default_factory=lambda: os.getenv("DATABASE_URL", "sqlite:///./feedback.db")
    )
    database_echo: bool = field(
        default_factory=lambda: _env_flag("DATABASE_ECHO", "false")
    )
    seed_on_startup: bool = field(
        default_factory=lambda: _env_flag("SEED_ON_STARTUP", "true")
    )
    log_level: str = field(
        default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper()
    )


def get_settings() -> Settings:
    """Factory function to create settings instance."""
    return Settings()
