"""Ownership commands."""

from .cascade_ownership import (
    CascadeOwnership,
    CascadeOwnershipResult,
    CascadeOutcome,
    build_update_operations,
    cascade,
    create_cascade_ownership_command,
)

__all__ = [
    "CascadeOwnership",
    "CascadeOwnershipResult",
    "CascadeOutcome",
    "build_update_operations",
    "cascade",
    "create_cascade_ownership_command",
]
