"""Document store protocol.

ONLY batch update contract - the persistence boundary a cascade submits
its operations to.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Sequence
from typing_extensions import Protocol, runtime_checkable

from ..value_objects.update_operation import UpdateOperation


@runtime_checkable
class DocumentStore(Protocol):
    """Batch ownership update entry point scoped to one document kind."""

    async def update_documents(
        self,
        document_kind: str,
        operations: Sequence[UpdateOperation]
    ) -> Any:
        """Apply all operations as one logical call.

        Raises on failure. Atomicity and partial-failure behaviour are the
        store's own concern.
        """
        ...
