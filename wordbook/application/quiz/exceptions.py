"""Exceptions for quiz use cases."""

from wordbook.exceptions import NotFoundError


class QuizSessionNotFoundError(NotFoundError):
    """Quiz session not found (never started, discarded, or replaced)."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Quiz session with id {session_id} not found")
