"""Cascade API routers."""

from .cascade_router import cascade_router

__all__ = [
    "cascade_router",
]
