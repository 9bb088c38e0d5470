"""Folder node protocol.

ONLY folder tree contract - the shape a host folder object must have for
a cascade to walk it. ``get_subfolders`` is optional at runtime; when it
is missing or raises, traversal falls back to walking ``children``.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, List, Optional, Sequence
from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class DocumentNode(Protocol):
    """Anything with a document id."""

    id: str


@runtime_checkable
class FolderNode(Protocol):
    """Folder as seen by the cascade engine."""

    id: str
    name: str
    document_kind: str

    @property
    def contents(self) -> Optional[Sequence[DocumentNode]]:
        """Documents held directly by this folder."""
        ...

    @property
    def children(self) -> Optional[Sequence[Any]]:
        """Direct child folders, possibly wrapped in tree nodes exposing ``.folder``."""
        ...

    def get_subfolders(self, recursive: bool = False) -> List['FolderNode']:
        """Enumerate descendant folders."""
        ...
