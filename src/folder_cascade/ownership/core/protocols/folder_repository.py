"""Folder repository protocol.

ONLY folder lookup contract - resolves a folder id to a walkable folder
tree for the submission handler.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Optional
from typing_extensions import Protocol, runtime_checkable

from .folder_node import FolderNode


@runtime_checkable
class FolderRepository(Protocol):
    """Folder lookup."""

    async def get_folder(self, folder_id: str) -> Optional[FolderNode]:
        """Get the folder with its subtree loaded.

        Returns None if the folder doesn't exist.
        """
        ...
