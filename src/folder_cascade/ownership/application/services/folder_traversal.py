"""Folder traversal service.

ONLY folder tree enumeration - collects a root folder plus every
descendant folder, preferring the folder's own recursive enumeration and
falling back to an explicit-stack walk over direct children.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Set
from typing_extensions import Protocol, runtime_checkable

from ...core.exceptions import SubfolderEnumerationFailed
from ...core.protocols import FolderNode

logger = logging.getLogger(__name__)


@runtime_checkable
class SubfolderEnumerator(Protocol):
    """Strategy enumerating every descendant of a folder (root excluded)."""

    def enumerate(self, root: FolderNode) -> List[FolderNode]:
        """Return all descendant folders, any order."""
        ...


def _unwrap(node: Any) -> Optional[FolderNode]:
    """Tree wrapper nodes expose the folder they hold as ``.folder``."""
    if node is None:
        return None
    folder = getattr(node, "folder", None)
    return folder if folder is not None else node


class RecursiveSubfolderEnumerator:
    """Uses the folder's own ``get_subfolders(recursive=True)`` capability."""

    def enumerate(self, root: FolderNode) -> List[FolderNode]:
        get_subfolders = getattr(root, "get_subfolders", None)
        if not callable(get_subfolders):
            raise SubfolderEnumerationFailed(
                f"Folder {getattr(root, 'name', root)!r} has no get_subfolders capability",
                folder_id=getattr(root, "id", None)
            )
        return list(get_subfolders(recursive=True) or [])


class ManualSubfolderEnumerator:
    """Depth-first walk over ``children`` with an explicit stack.

    Iterative so tree depth is bounded only by memory, and identity-guarded
    so a cyclic tree still terminates.
    """

    def enumerate(self, root: FolderNode) -> List[FolderNode]:
        result: List[FolderNode] = []
        visited: Set[int] = {id(root)}
        stack = [_unwrap(child) for child in (getattr(root, "children", None) or [])]

        while stack:
            folder = stack.pop()
            if folder is None or id(folder) in visited:
                continue
            visited.add(id(folder))
            result.append(folder)
            for child in getattr(folder, "children", None) or []:
                stack.append(_unwrap(child))

        return result


@dataclass
class TraversalResult:
    """Folders collected for one cascade, root first."""

    folders: List[FolderNode]
    used_fallback: bool = False

    @property
    def subfolder_count(self) -> int:
        """Collected folders excluding the root."""
        return len(self.folders) - 1


class FolderTraversal:
    """Collects a folder tree with a try/fallback strategy policy."""

    def __init__(
        self,
        primary: Optional[SubfolderEnumerator] = None,
        fallback: Optional[SubfolderEnumerator] = None
    ):
        self._primary = primary or RecursiveSubfolderEnumerator()
        self._fallback = fallback or ManualSubfolderEnumerator()

    def collect(self, root: FolderNode) -> TraversalResult:
        """Collect the root and every descendant folder exactly once."""
        used_fallback = False
        try:
            descendants = self._primary.enumerate(root)
        except Exception as e:
            logger.warning(f"Subfolder enumeration failed for {getattr(root, 'name', root)!r}, using manual traversal: {e}")
            descendants = self._fallback.enumerate(root)
            used_fallback = True

        return TraversalResult(
            folders=_dedupe([root], descendants),
            used_fallback=used_fallback
        )


def _dedupe(head: List[FolderNode], tail: Iterable[FolderNode]) -> List[FolderNode]:
    seen: Set[int] = set()
    result: List[FolderNode] = []
    for folder in [*head, *tail]:
        if folder is None or id(folder) in seen:
            continue
        seen.add(id(folder))
        result.append(folder)
    return result


def collect_folders(root: FolderNode) -> TraversalResult:
    """Collect a folder tree with the default strategies."""
    return FolderTraversal().collect(root)
