"""Ownership cascade core domain layer.

Value objects, entities, exceptions and protocols only. No traversal or
store logic lives here.
"""

from .value_objects import PermissionLevel, OwnershipAssignment, UpdateOperation, DEFAULT_SUBJECT
from .entities import Document, Folder
from .exceptions import FolderNotFound, DocumentUpdateFailed, SubfolderEnumerationFailed
from .protocols import FolderNode, DocumentNode, DocumentStore, FolderRepository

__all__ = [
    # Value Objects
    "PermissionLevel",
    "OwnershipAssignment",
    "UpdateOperation",
    "DEFAULT_SUBJECT",

    # Entities
    "Document",
    "Folder",

    # Exceptions
    "FolderNotFound",
    "DocumentUpdateFailed",
    "SubfolderEnumerationFailed",

    # Protocols
    "FolderNode",
    "DocumentNode",
    "DocumentStore",
    "FolderRepository",
]
