"""Cascade API dependencies."""

from .cascade_dependencies import get_submission_handler

__all__ = [
    "get_submission_handler",
]
