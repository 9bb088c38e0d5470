"""Folder not found exception.

ONLY folder not found - raised when a submission names a folder the
repository cannot resolve.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Dict, Optional

from ....core.exceptions import FolderCascadeError


class FolderNotFound(FolderCascadeError):
    """Raised when a requested folder cannot be found."""

    def __init__(
        self,
        message: str,
        folder_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        enhanced_details = dict(details or {})
        if folder_id:
            enhanced_details["folder_id"] = folder_id

        super().__init__(
            message=message,
            error_code="FOLDER_NOT_FOUND",
            details=enhanced_details
        )
        self.folder_id = folder_id
