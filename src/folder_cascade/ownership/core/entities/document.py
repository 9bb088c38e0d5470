"""Document entity.

ONLY document - a leaf item inside a folder whose ownership is the thing
a cascade overwrites.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class Document:
    """Leaf document held by a folder."""

    id: str
    kind: str
    name: str = ""
    folder_id: Optional[str] = None
    ownership: Dict[str, int] = field(default_factory=dict)

    def __post_init__(self):
        if not self.id:
            raise ValueError("Document id is required")
        if not self.kind:
            raise ValueError("Document kind is required")
