"""Ownership protocols."""

from .folder_node import FolderNode, DocumentNode
from .document_store import DocumentStore
from .folder_repository import FolderRepository

__all__ = [
    "FolderNode",
    "DocumentNode",
    "DocumentStore",
    "FolderRepository",
]
