"""Ownership cascade module.

Applies an ownership change made on a folder to every document nested
anywhere inside it, including documents of sub-folders at any depth.

Architecture:
- core/: value objects, entities, exceptions and protocols only
- application/: normalizer, traversal, cascade command, submission handler
- infrastructure/: in-memory and PostgreSQL stores
- api/: FastAPI router for form submissions

Usage:
    from folder_cascade.ownership import normalize, cascade

    result = await cascade(folder, normalize(form_data), store)
"""

from .core.value_objects import PermissionLevel, OwnershipAssignment, UpdateOperation, DEFAULT_SUBJECT
from .core.entities import Document, Folder
from .core.exceptions import FolderNotFound, DocumentUpdateFailed, SubfolderEnumerationFailed
from .core.protocols import FolderNode, DocumentStore, FolderRepository
from .application import (
    normalize,
    cascade,
    CascadeOwnership,
    CascadeOwnershipResult,
    CascadeOutcome,
    FolderTraversal,
    OwnershipFormSubmission,
    OwnershipFormSubmittedHandler,
    build_notification,
)

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
    "DocumentStore",
    "FolderRepository",

    # Operations
    "normalize",
    "cascade",
    "CascadeOwnership",
    "CascadeOwnershipResult",
    "CascadeOutcome",
    "FolderTraversal",
    "OwnershipFormSubmission",
    "OwnershipFormSubmittedHandler",
    "build_notification",
]
