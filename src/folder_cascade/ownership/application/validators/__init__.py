"""Ownership validators."""

from .ownership_normalizer import normalize

__all__ = [
    "normalize",
]
