"""Cascade ownership command.

ONLY ownership cascade - applies one ownership assignment to every
document in a folder and all of its sub-folders with a single batch store
call. Folder ownership itself is never modified.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable, List, Optional

from ...core.protocols import DocumentStore, FolderNode
from ...core.value_objects import OwnershipAssignment, UpdateOperation
from ..services.folder_traversal import FolderTraversal

logger = logging.getLogger(__name__)


class CascadeOutcome(str, Enum):
    """Terminal outcome of one cascade invocation."""
    NOTHING_TO_APPLY = "nothing_to_apply"
    NO_DOCUMENTS = "no_documents"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass
class CascadeOwnershipResult:
    """Result of a cascade invocation."""

    outcome: CascadeOutcome
    item_count: int = 0
    subfolder_count: int = 0
    folder_count: int = 0
    used_fallback: bool = False
    error: Optional[Exception] = None
    duration_ms: int = 0

    @property
    def success(self) -> bool:
        return self.outcome is CascadeOutcome.SUCCESS

    @property
    def is_noop(self) -> bool:
        """True when the store was never called."""
        return self.outcome in (CascadeOutcome.NOTHING_TO_APPLY, CascadeOutcome.NO_DOCUMENTS)


def build_update_operations(
    folders: Iterable[FolderNode],
    assignment: OwnershipAssignment
) -> List[UpdateOperation]:
    """Flatten every document across ``folders`` into update operations.

    Every operation carries the same assignment.
    """
    operations: List[UpdateOperation] = []
    for folder in folders:
        documents = getattr(folder, "contents", None) or []
        logger.debug(f"  Folder {getattr(folder, 'name', folder)!r}: {len(documents)} document(s)")
        for document in documents:
            operations.append(UpdateOperation(document_id=document.id, ownership=assignment))
    return operations


class CascadeOwnership:
    """Command to cascade an ownership assignment down a folder tree.

    Runs each invocation to exactly one terminal outcome:
    nothing to apply, no documents, success, or failure. Traversal and store
    errors are reported in the result, never raised.
    """

    def __init__(self, store: DocumentStore, traversal: Optional[FolderTraversal] = None):
        self._store = store
        self._traversal = traversal or FolderTraversal()

    async def execute(
        self,
        root: FolderNode,
        assignment: OwnershipAssignment
    ) -> CascadeOwnershipResult:
        """Execute the cascade.

        Args:
            root: Folder whose contents, at any depth, receive the assignment
            assignment: Normalized ownership assignment

        Returns:
            Cascade result with counts, or the error on failure
        """
        start_time = datetime.now(timezone.utc)

        if assignment.is_empty:
            logger.info("No ownership values to apply (all set to inherit). Skipping.")
            return CascadeOwnershipResult(
                outcome=CascadeOutcome.NOTHING_TO_APPLY,
                duration_ms=_elapsed_ms(start_time)
            )

        logger.info(f"Ownership to apply: {assignment.to_dict()}")

        try:
            traversal = self._traversal.collect(root)
            logger.info(f"Processing {len(traversal.folders)} folder(s) (including target)")

            operations = build_update_operations(traversal.folders, assignment)
            logger.info(f"Total documents to update: {len(operations)}")
        except Exception as e:
            logger.error(
                f"Error collecting documents under folder {getattr(root, 'name', root)!r}: {e}",
                exc_info=True
            )
            return CascadeOwnershipResult(
                outcome=CascadeOutcome.FAILURE,
                error=e,
                duration_ms=_elapsed_ms(start_time)
            )

        if not operations:
            return CascadeOwnershipResult(
                outcome=CascadeOutcome.NO_DOCUMENTS,
                subfolder_count=traversal.subfolder_count,
                folder_count=len(traversal.folders),
                used_fallback=traversal.used_fallback,
                duration_ms=_elapsed_ms(start_time)
            )

        try:
            await self._store.update_documents(root.document_kind, operations)
        except Exception as e:
            logger.error(f"Error cascading ownership for folder {root.name!r}: {e}", exc_info=True)
            return CascadeOwnershipResult(
                outcome=CascadeOutcome.FAILURE,
                subfolder_count=traversal.subfolder_count,
                folder_count=len(traversal.folders),
                used_fallback=traversal.used_fallback,
                error=e,
                duration_ms=_elapsed_ms(start_time)
            )

        logger.info(f"Successfully updated {len(operations)} document(s)")
        return CascadeOwnershipResult(
            outcome=CascadeOutcome.SUCCESS,
            item_count=len(operations),
            subfolder_count=traversal.subfolder_count,
            folder_count=len(traversal.folders),
            used_fallback=traversal.used_fallback,
            duration_ms=_elapsed_ms(start_time)
        )


def _elapsed_ms(start_time: datetime) -> int:
    return int((datetime.now(timezone.utc) - start_time).total_seconds() * 1000)


async def cascade(
    root: FolderNode,
    assignment: OwnershipAssignment,
    store: DocumentStore
) -> CascadeOwnershipResult:
    """Cascade ``assignment`` to every document under ``root``."""
    return await CascadeOwnership(store).execute(root, assignment)


def create_cascade_ownership_command(
    store: DocumentStore,
    traversal: Optional[FolderTraversal] = None
) -> CascadeOwnership:
    """Create cascade ownership command."""
    return CascadeOwnership(store, traversal)
