"""folder-cascade: cascade folder ownership to every nested document."""

from .__version__ import __version__
from .core.exceptions import FolderCascadeError
from .ownership import (
    PermissionLevel,
    OwnershipAssignment,
    Folder,
    Document,
    normalize,
    cascade,
    CascadeOutcome,
    CascadeOwnershipResult,
)

__all__ = [
    "__version__",
    "FolderCascadeError",
    "PermissionLevel",
    "OwnershipAssignment",
    "Folder",
    "Document",
    "normalize",
    "cascade",
    "CascadeOutcome",
    "CascadeOwnershipResult",
]
