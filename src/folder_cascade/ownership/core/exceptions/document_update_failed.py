"""Document update failed exception.

ONLY store failure - raised by store adapters when a batch ownership
update is rejected.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Dict, List, Optional

from ....core.exceptions import FolderCascadeError


class DocumentUpdateFailed(FolderCascadeError):
    """Raised when the store rejects a batch update."""

    def __init__(
        self,
        message: str,
        document_kind: Optional[str] = None,
        document_ids: Optional[List[str]] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        enhanced_details = dict(details or {})
        if document_kind:
            enhanced_details["document_kind"] = document_kind
        if document_ids:
            enhanced_details["document_ids"] = list(document_ids)

        super().__init__(
            message=message,
            error_code="DOCUMENT_UPDATE_FAILED",
            details=enhanced_details
        )
        self.document_kind = document_kind
        self.document_ids = list(document_ids or [])
