"""Shared core for folder-cascade."""

from .exceptions import FolderCascadeError, create_error_response

__all__ = [
    "FolderCascadeError",
    "create_error_response",
]
