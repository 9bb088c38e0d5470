"""Ownership normalizer.

ONLY ownership normalization - turns raw submitted form values into a
validated OwnershipAssignment, dropping every entry that is not a
concrete permission decision.

Following maximum separation architecture - one file = one purpose.
"""

import logging
from typing import Any, Dict, Mapping

from ...core.value_objects import OwnershipAssignment, PermissionLevel

logger = logging.getLogger(__name__)


def normalize(raw: Mapping[str, Any]) -> OwnershipAssignment:
    """Build an ownership assignment from raw form data.

    Args:
        raw: Subject identifier -> raw value, as submitted

    Returns:
        Assignment holding only the subjects whose value parsed to a
        concrete level. May be empty; that is a valid "nothing to apply".
    """
    levels: Dict[str, PermissionLevel] = {}

    for subject, value in raw.items():
        level = PermissionLevel.parse(value)
        if level is None:
            logger.debug(f"Skipping {subject!r} with value {value!r} (not a concrete permission level)")
            continue
        if not isinstance(subject, str) or not subject:
            logger.debug(f"Skipping invalid subject identifier {subject!r}")
            continue
        levels[subject] = level

    return OwnershipAssignment(levels)
