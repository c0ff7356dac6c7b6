"""Quiz routers."""

from .quiz import router

__all__ = ["router"]
