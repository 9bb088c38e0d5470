"""Ownership application services."""

from .folder_traversal import (
    FolderTraversal,
    TraversalResult,
    SubfolderEnumerator,
    RecursiveSubfolderEnumerator,
    ManualSubfolderEnumerator,
    collect_folders,
)

__all__ = [
    "FolderTraversal",
    "TraversalResult",
    "SubfolderEnumerator",
    "RecursiveSubfolderEnumerator",
    "ManualSubfolderEnumerator",
    "collect_folders",
]
