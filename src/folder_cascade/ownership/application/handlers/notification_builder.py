"""Notification builder.

ONLY user-facing notification - translates a cascade result into the
message an operator sees. Error detail is never included; it goes to the
log only.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from ..commands.cascade_ownership import CascadeOutcome, CascadeOwnershipResult


class NotificationLevel(str, Enum):
    """Notification severity."""
    INFO = "info"
    ERROR = "error"


NO_DOCUMENTS = "CASCADE_PERMS.NoDocuments"
SUCCESS_CASCADE = "CASCADE_PERMS.SuccessCascade"
ERROR_CASCADE = "CASCADE_PERMS.ErrorCascade"

DEFAULT_MESSAGES = {
    NO_DOCUMENTS: "No documents found to update.",
    SUCCESS_CASCADE: "Updated {count} document(s) across {folders} sub-folder(s).",
    ERROR_CASCADE: "Error applying cascaded permissions. Check the logs for details.",
}


@dataclass(frozen=True)
class CascadeNotification:
    """Message shown to the operator after a cascade."""

    level: NotificationLevel
    key: str
    message: str


def build_notification(
    result: CascadeOwnershipResult,
    messages: Optional[Mapping[str, str]] = None
) -> Optional[CascadeNotification]:
    """Build the notification for a cascade result.

    Args:
        result: Terminal cascade result
        messages: Replacement catalogue keyed like DEFAULT_MESSAGES; missing
            keys fall back to the defaults

    Returns:
        Notification, or None when there was nothing to apply
    """
    catalogue = {**DEFAULT_MESSAGES, **(messages or {})}

    if result.outcome is CascadeOutcome.NO_DOCUMENTS:
        return CascadeNotification(NotificationLevel.INFO, NO_DOCUMENTS, catalogue[NO_DOCUMENTS])

    if result.outcome is CascadeOutcome.SUCCESS:
        message = catalogue[SUCCESS_CASCADE].format(
            count=result.item_count,
            folders=result.subfolder_count
        )
        return CascadeNotification(NotificationLevel.INFO, SUCCESS_CASCADE, message)

    if result.outcome is CascadeOutcome.FAILURE:
        return CascadeNotification(NotificationLevel.ERROR, ERROR_CASCADE, catalogue[ERROR_CASCADE])

    return None
