"""Subfolder enumeration failed exception.

ONLY enumeration failure - raised by a traversal strategy that cannot
enumerate a folder's descendants. Always handled by the traversal
service, never surfaced to callers.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Optional

from ....core.exceptions import FolderCascadeError


class SubfolderEnumerationFailed(FolderCascadeError):
    """Raised when a folder cannot enumerate its descendants."""

    def __init__(self, message: str, folder_id: Optional[str] = None):
        super().__init__(
            message=message,
            error_code="SUBFOLDER_ENUMERATION_FAILED",
            details={"folder_id": folder_id} if folder_id else None
        )
        self.folder_id = folder_id
