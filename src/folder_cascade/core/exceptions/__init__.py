"""Library-wide exception base."""

from .base import FolderCascadeError, create_error_response

__all__ = [
    "FolderCascadeError",
    "create_error_response",
]
