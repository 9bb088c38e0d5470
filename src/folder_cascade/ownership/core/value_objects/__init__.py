"""Ownership value objects."""

from .permission_level import PermissionLevel
from .ownership_assignment import OwnershipAssignment, DEFAULT_SUBJECT
from .update_operation import UpdateOperation

__all__ = [
    "PermissionLevel",
    "OwnershipAssignment",
    "DEFAULT_SUBJECT",
    "UpdateOperation",
]
