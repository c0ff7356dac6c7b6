"""Protocol for holding live quiz sessions."""

from typing import Protocol

from wordbook.domain.quiz.entities.quiz_session import QuizSession, QuizSessionId


class QuizSessionStoreProtocol(Protocol):
    """Holds ephemeral quiz sessions between calls. Sessions are never persisted."""

    def get(self, session_id: QuizSessionId) -> QuizSession | None:
        ...

    def save(self, session: QuizSession) -> None:
        ...

    def discard(self, session_id: QuizSessionId) -> bool:
        """
        Forget a session.

        Returns:
            True if it existed, False otherwise
        """
        ...

    def discard_all(self) -> int:
        """
        Forget every session.

        Returns:
            How many sessions were dropped
        """
        ...
