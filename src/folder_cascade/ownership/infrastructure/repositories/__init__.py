"""Ownership repositories."""

from .memory_document_store import InMemoryDocumentStore
from .postgres_document_store import (
    PostgresFolderRepository,
    PostgresDocumentStore,
    build_folder_tree,
    create_connection_pool,
    ensure_schema,
    validate_schema_name,
)

__all__ = [
    "InMemoryDocumentStore",
    "PostgresFolderRepository",
    "PostgresDocumentStore",
    "build_folder_tree",
    "create_connection_pool",
    "ensure_schema",
    "validate_schema_name",
]
