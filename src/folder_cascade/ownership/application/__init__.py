"""Ownership application layer.

Validators, services, commands and handlers for the ownership cascade.
"""

from .validators import normalize
from .services import FolderTraversal, TraversalResult, collect_folders
from .commands import CascadeOwnership, CascadeOwnershipResult, CascadeOutcome, cascade
from .handlers import (
    OwnershipFormSubmission,
    OwnershipFormSubmittedHandler,
    CascadeNotification,
    NotificationLevel,
    build_notification,
)

__all__ = [
    "normalize",
    "FolderTraversal",
    "TraversalResult",
    "collect_folders",
    "CascadeOwnership",
    "CascadeOwnershipResult",
    "CascadeOutcome",
    "cascade",
    "OwnershipFormSubmission",
    "OwnershipFormSubmittedHandler",
    "CascadeNotification",
    "NotificationLevel",
    "build_notification",
]
