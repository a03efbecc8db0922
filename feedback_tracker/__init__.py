"""
Feedback Tracker Package

A Clean Architecture implementation of a feedback tracking REST service.
"""

from feedback_tracker.container import Container, create_container
from feedback_tracker.main import create_app

__all__ = ["Container", "create_container", "create_app"]
