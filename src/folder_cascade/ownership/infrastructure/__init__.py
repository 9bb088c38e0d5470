"""Ownership infrastructure: store adapters."""

from .repositories import InMemoryDocumentStore, PostgresFolderRepository, PostgresDocumentStore

__all__ = [
    "InMemoryDocumentStore",
    "PostgresFolderRepository",
    "PostgresDocumentStore",
]
