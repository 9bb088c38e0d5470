"""Ownership handlers."""

from .ownership_form_submitted import (
    OwnershipFormSubmission,
    OwnershipFormSubmittedHandler,
    CASCADE_FIELD,
)
from .notification_builder import (
    CascadeNotification,
    NotificationLevel,
    DEFAULT_MESSAGES,
    build_notification,
)

__all__ = [
    "OwnershipFormSubmission",
    "OwnershipFormSubmittedHandler",
    "CASCADE_FIELD",
    "CascadeNotification",
    "NotificationLevel",
    "DEFAULT_MESSAGES",
    "build_notification",
]
