"""Quiz session stores."""

from .in_memory_quiz_session_store import InMemoryQuizSessionStore

__all__ = ["InMemoryQuizSessionStore"]
