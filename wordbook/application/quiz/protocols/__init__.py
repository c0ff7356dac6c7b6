"""Quiz ports."""

from .quiz_session_store import QuizSessionStoreProtocol

__all__ = ["QuizSessionStoreProtocol"]
