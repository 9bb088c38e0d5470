"""Update operation value object.

ONLY update operation - one (document id, assignment) pair destined for
the batch store call. Built, submitted and discarded within one cascade.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass
from typing import Any, Dict, Union

from .ownership_assignment import OwnershipAssignment


@dataclass(frozen=True)
class UpdateOperation:
    """Single document ownership update."""

    document_id: Union[str, int]
    ownership: OwnershipAssignment

    def __post_init__(self):
        """Validate document id."""
        if self.document_id is None or self.document_id == "":
            raise ValueError("UpdateOperation requires a document id")

    def to_payload(self) -> Dict[str, Any]:
        """Store payload in ``{"_id": ..., "ownership": {...}}`` form."""
        return {"_id": self.document_id, "ownership": self.ownership.to_dict()}
