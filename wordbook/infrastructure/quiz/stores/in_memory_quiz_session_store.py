"""In-memory store for live quiz sessions."""

from wordbook.domain.quiz.entities.quiz_session import QuizSession, QuizSessionId


class InMemoryQuizSessionStore:
    """Holds quiz sessions in a dict for the life of the process."""

    def __init__(self) -> None:
        self._sessions: dict[QuizSessionId, QuizSession] = {}

    def get(self, session_id: QuizSessionId) -> QuizSession | None:
        return self._sessions.get(session_id)

    def save(self, session: QuizSession) -> None:
        self._sessions[session.id] = session

    def discard(self, session_id: QuizSessionId) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def discard_all(self) -> int:
        dropped = len(self._sessions)
        self._sessions.clear()
        return dropped

    def __len__(self) -> int:
        return len(self._sessions)
