"""Ownership assignment value object.

ONLY ownership assignment - maps subject identifiers (user ids or the
reserved ``default`` subject) to a concrete permission level. One
assignment is applied uniformly to every document of a cascade.

Following maximum separation architecture - one file = one purpose.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Dict, Iterator, Mapping as MappingType, Optional

from .permission_level import PermissionLevel


DEFAULT_SUBJECT = "default"


class OwnershipAssignment(Mapping):
    """Immutable subject -> PermissionLevel mapping.

    Compares equal to any mapping with the same items, so
    ``OwnershipAssignment({"default": PermissionLevel.OBSERVER}) == {"default": 2}``.
    """

    __slots__ = ("_levels",)

    def __init__(self, levels: Optional[MappingType[str, PermissionLevel]] = None):
        validated: Dict[str, PermissionLevel] = {}
        for subject, level in (levels or {}).items():
            if not isinstance(subject, str) or not subject:
                raise ValueError(f"Subject identifier must be a non-empty string, got {subject!r}")
            if not isinstance(level, PermissionLevel):
                raise ValueError(
                    f"Level for {subject!r} must be a PermissionLevel, got {type(level).__name__}"
                )
            validated[subject] = level
        self._levels = MappingProxyType(validated)

    @classmethod
    def empty(cls) -> 'OwnershipAssignment':
        """Assignment with nothing to apply."""
        return cls()

    def __getitem__(self, subject: str) -> PermissionLevel:
        return self._levels[subject]

    def __iter__(self) -> Iterator[str]:
        return iter(self._levels)

    def __len__(self) -> int:
        return len(self._levels)

    def __hash__(self) -> int:
        return hash(frozenset(self._levels.items()))

    @property
    def is_empty(self) -> bool:
        """True when no subject carries a concrete level."""
        return not self._levels

    def to_dict(self) -> Dict[str, int]:
        """Plain ``{subject: int}`` form for storage payloads and logs."""
        return {subject: int(level) for subject, level in self._levels.items()}

    def __repr__(self) -> str:
        return f"OwnershipAssignment({self.to_dict()!r})"
