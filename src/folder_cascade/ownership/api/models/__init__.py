"""Cascade API models."""

from .cascade_response import CascadeResponse, NotificationResponse

__all__ = [
    "CascadeResponse",
    "NotificationResponse",
]
