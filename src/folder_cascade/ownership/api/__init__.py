"""Ownership cascade HTTP API."""

from .routers import cascade_router
from .models import CascadeResponse, NotificationResponse

__all__ = [
    "cascade_router",
    "CascadeResponse",
    "NotificationResponse",
]
