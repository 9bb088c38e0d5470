"""Ownership cascade exceptions."""

from .folder_not_found import FolderNotFound
from .document_update_failed import DocumentUpdateFailed
from .subfolder_enumeration_failed import SubfolderEnumerationFailed

__all__ = [
    "FolderNotFound",
    "DocumentUpdateFailed",
    "SubfolderEnumerationFailed",
]
