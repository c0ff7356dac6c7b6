"""Vocabulary routers."""

from .words import router

__all__ = ["router"]
