from pydantic import BaseModel, ConfigDict, Field
from typing import Optional

from feedback_tracker.domain import Feedback, FeedbackPriority, FeedbackStatus


class FeedbackRequestDTO(BaseModel):
    """Request DTO for creating or updating feedback.

    Fields are optional here so that missing values reach domain validation
    and are reported together with the other field errors.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    priority: Optional[str] = None


class StatusRequestDTO(BaseModel):
    """Request DTO for the status endpoint."""
    status: Optional[str] = None


class FeedbackDTO(BaseModel):
    """Response DTO for a feedback item."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: str
    category: str
    status: FeedbackStatus
    priority: FeedbackPriority
    created_at: int = Field(alias="createdAt")

    @classmethod
    def from_entity(cls, feedback: Feedback) -> "FeedbackDTO":
        return cls(
            id=feedback.id,
            title=feedback.title,
            description=feedback.description,
            category=feedback.category,
            status=feedback.status,
            priority=feedback.priority,
            created_at=feedback.created_at,
        )


class HealthStatusDTO(BaseModel):
    """DTO for health status message."""
    message: str
