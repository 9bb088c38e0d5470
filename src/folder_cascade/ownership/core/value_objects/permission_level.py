"""Permission level value object.

ONLY permission level - the closed set of concrete ownership tiers a
document can be assigned. Host sentinels meaning "inherit" or "no change"
are not levels and never parse into one.

Following maximum separation architecture - one file = one purpose.
"""

import math
import re
from enum import IntEnum
from typing import Any, Optional

# Plain ASCII decimal notation; no digit separators or non-ASCII digits.
_NUMERIC_TEXT = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$", re.ASCII)


class PermissionLevel(IntEnum):
    """Ordered ownership tier, encoded as 0-3."""

    NONE = 0
    LIMITED = 1
    OBSERVER = 2
    OWNER = 3

    @classmethod
    def parse(cls, raw: Any) -> Optional['PermissionLevel']:
        """Parse a raw form value into a level.

        Returns None for anything that is not exactly one of the concrete
        levels. Membership is the only test, so whatever number a host uses
        for its sentinels is rejected without being named here.
        """
        if isinstance(raw, bool):
            return None

        if isinstance(raw, str):
            text = raw.strip()
            if not _NUMERIC_TEXT.match(text):
                return None
            try:
                number = float(text)
            except ValueError:
                return None
        elif isinstance(raw, (int, float)):
            number = float(raw)
        else:
            return None

        if not math.isfinite(number) or not number.is_integer():
            return None

        try:
            return cls(int(number))
        except ValueError:
            return None

    @property
    def label(self) -> str:
        """Human readable name, e.g. ``Observer``."""
        return self.name.capitalize()
