"""Ownership entities."""

from .document import Document
from .folder import Folder

__all__ = [
    "Document",
    "Folder",
]
