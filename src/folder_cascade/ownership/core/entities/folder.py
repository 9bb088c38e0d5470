"""Folder entity.

ONLY folder - a container node grouping documents of a single kind and
nested sub-folders. Folder ownership itself is never touched by a cascade.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .document import Document


@dataclass(eq=False)
class Folder:
    """Folder node in a document tree.

    Identity-compared: two folders are the same node only if they are the
    same object, which is what traversal de-duplication relies on.
    """

    id: str
    name: str
    document_kind: str
    contents: List[Document] = field(default_factory=list)
    children: List['Folder'] = field(default_factory=list)
    parent: Optional['Folder'] = field(default=None, repr=False)

    def __post_init__(self):
        if not self.id:
            raise ValueError("Folder id is required")
        if not self.document_kind:
            raise ValueError("Folder document kind is required")

    def add_document(self, document: Document) -> Document:
        """Attach a document to this folder."""
        if document.kind != self.document_kind:
            raise ValueError(
                f"Folder {self.id} holds {self.document_kind} documents, got {document.kind}"
            )
        document.folder_id = self.id
        self.contents.append(document)
        return document

    def add_subfolder(self, folder: 'Folder') -> 'Folder':
        """Attach a child folder to this folder."""
        if folder.document_kind != self.document_kind:
            raise ValueError(
                f"Folder {self.id} holds {self.document_kind} documents, got sub-folder of {folder.document_kind}"
            )
        folder.parent = self
        self.children.append(folder)
        return folder

    def get_subfolders(self, recursive: bool = False) -> List['Folder']:
        """Return child folders, or every descendant when ``recursive``."""
        if not recursive:
            return list(self.children)

        result: List[Folder] = []
        for child in self.children:
            result.append(child)
            result.extend(child.get_subfolders(recursive=True))
        return result
