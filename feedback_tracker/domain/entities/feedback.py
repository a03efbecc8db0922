import threading
import time
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union

from feedback_tracker.domain.errors import ValidationError


TITLE_MAX_LENGTH = 140
DESCRIPTION_MAX_LENGTH = 2000
CATEGORY_MAX_LENGTH = 64


class FeedbackStatus(str, Enum):
    """Lifecycle status of a feedback item."""
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"
    CLOSED = "CLOSED"


class FeedbackPriority(str, Enum):
    """Priority assigned by the submitter."""
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


def _check_text(errors: Dict[str, str], name: str, value: Optional[str], max_length: int) -> None:
    if value is None:
        errors[name] = "is required"
    elif not isinstance(value, str):
        errors[name] = "must be a string"
    elif not value.strip():
        errors[name] = "must not be blank"
    elif len(value) > max_length:
        errors[name] = f"must be at most {max_length} characters"


def _parse_member(enum_cls, value, field_name: str, errors: Dict[str, str]):
    if isinstance(value, enum_cls):
        return value
    if value is None:
        errors[field_name] = "is required"
        return None
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        errors[field_name] = f"must be one of: {allowed}"
        return None


def validate_feedback_fields(
    title: Optional[str],
    description: Optional[str],
    category: Optional[str],
    priority: Union[FeedbackPriority, str, None],
) -> FeedbackPriority:
    """
    Validate the user-editable feedback fields.

    All violations are collected before raising, so a single
    ValidationError names every offending field.

    Returns:
        The parsed priority.
    """
    errors: Dict[str, str] = {}
    _check_text(errors, "title", title, TITLE_MAX_LENGTH)
    _check_text(errors, "description", description, DESCRIPTION_MAX_LENGTH)
    _check_text(errors, "category", category, CATEGORY_MAX_LENGTH)
    parsed_priority = _parse_member(FeedbackPriority, priority, "priority", errors)

    if errors:
        raise ValidationError(errors)
    return parsed_priority


def parse_status(value: Union[FeedbackStatus, str, None]) -> FeedbackStatus:
    """Parse a status name, raising ValidationError outside the closed set."""
    errors: Dict[str, str] = {}
    status = _parse_member(FeedbackStatus, value, "status", errors)
    if errors:
        raise ValidationError(errors)
    return status


@dataclass
class Feedback:
    """Domain entity representing a single feedback item."""
    title: str
    description: str
    category: str
    priority: FeedbackPriority = FeedbackPriority.MEDIUM
    status: FeedbackStatus = FeedbackStatus.OPEN
    created_at: int = 0
    id: Optional[str] = None

    @classmethod
    def create(
        cls,
        title: str,
        description: str,
        category: str,
        priority: Union[FeedbackPriority, str],
        created_at: int,
    ) -> "Feedback":
        """Build a new, not yet persisted, OPEN feedback item."""
        parsed_priority = validate_feedback_fields(title, description, category, priority)
        return cls(
            title=title,
            description=description,
            category=category,
            priority=parsed_priority,
            status=FeedbackStatus.OPEN,
            created_at=created_at,
        )

    def apply_update(
        self,
        title: str,
        description: str,
        category: str,
        priority: Union[FeedbackPriority, str],
    ) -> None:
        """Overwrite the editable fields. Status, id and created_at are kept."""
        parsed_priority = validate_feedback_fields(title, description, category, priority)
        self.title = title
        self.description = description
        self.category = category
        self.priority = parsed_priority

    def change_status(self, status: Union[FeedbackStatus, str]) -> None:
        self.status = parse_status(status)


class MillisClock:
    """
    Strictly increasing millisecond clock.

    Two calls never return the same value, so records created in the same
    millisecond still sort in creation order.
    """

    def __init__(self, time_source=time.time):
        self._time_source = time_source
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self) -> int:
        with self._lock:
            now = int(self._time_source() * 1000)
            if now <= self._last:
                now = self._last + 1
            self._last = now
            return now
