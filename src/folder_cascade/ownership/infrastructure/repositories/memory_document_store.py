"""In-memory document store for the ownership cascade."""

import asyncio
import logging
from typing import Dict, List, Optional, Sequence

from ...core.entities import Document, Folder
from ...core.exceptions import DocumentUpdateFailed
from ...core.value_objects import UpdateOperation

logger = logging.getLogger(__name__)


class InMemoryDocumentStore:
    """Memory-backed folder repository and document store.

    Handles ONLY in-process folder lookup and ownership updates. A batch is
    validated in full before anything is written, so a rejected batch
    leaves every document untouched.
    """

    def __init__(self, folders: Optional[Sequence[Folder]] = None):
        self._folders: Dict[str, Folder] = {}
        self._documents: Dict[str, Document] = {}
        self._lock = asyncio.Lock()
        self.update_calls = 0

        for folder in folders or []:
            self.add_folder(folder)

    def add_folder(self, folder: Folder) -> Folder:
        """Register a folder and its whole subtree."""
        stack = [folder]
        while stack:
            node = stack.pop()
            if node.id in self._folders:
                continue
            self._folders[node.id] = node
            for document in node.contents:
                self._documents[document.id] = document
            stack.extend(node.children)
        return folder

    async def get_folder(self, folder_id: str) -> Optional[Folder]:
        """Get folder by id."""
        return self._folders.get(folder_id)

    def get_document(self, document_id: str) -> Optional[Document]:
        """Get document by id."""
        return self._documents.get(document_id)

    async def update_documents(
        self,
        document_kind: str,
        operations: Sequence[UpdateOperation]
    ) -> List[Document]:
        """Merge each operation's ownership into its document."""
        async with self._lock:
            self.update_calls += 1

            missing = [op.document_id for op in operations if op.document_id not in self._documents]
            if missing:
                raise DocumentUpdateFailed(
                    f"{len(missing)} document(s) not found",
                    document_kind=document_kind,
                    document_ids=missing
                )

            mismatched = [
                op.document_id for op in operations
                if self._documents[op.document_id].kind != document_kind
            ]
            if mismatched:
                raise DocumentUpdateFailed(
                    f"{len(mismatched)} document(s) are not of kind {document_kind}",
                    document_kind=document_kind,
                    document_ids=mismatched
                )

            updated: List[Document] = []
            for op in operations:
                document = self._documents[op.document_id]
                document.ownership.update(op.ownership.to_dict())
                updated.append(document)

            logger.debug(f"Updated ownership of {len(updated)} {document_kind} document(s)")
            return updated
