"""Use case for running quiz sessions over the current word list."""

import structlog

from wordbook.application.quiz.exceptions import QuizSessionNotFoundError
from wordbook.application.quiz.protocols.quiz_session_store import QuizSessionStoreProtocol
from wordbook.application.vocabulary.protocols.word_repository import WordRepositoryProtocol
from wordbook.domain.quiz.entities.quiz_session import (
    QuizMode,
    QuizScope,
    QuizSession,
    QuizSessionId,
    ReviewItem,
)
from wordbook.domain.quiz.services.quiz_session_engine import QuizSessionEngine

logger = structlog.get_logger(__name__)


class QuizUseCase:
    """
    Runs quizzes by session id.

    Sessions start from a read-only snapshot of the word list; the quiz
    never changes the word list. Only one session is live at a time:
    starting a quiz destroys any session started before it.
    """

    def __init__(
        self,
        word_repository: WordRepositoryProtocol,
        session_store: QuizSessionStoreProtocol,
        engine: QuizSessionEngine,
    ) -> None:
        """Initialize use case with repository, session store and engine."""
        self.word_repository = word_repository
        self.session_store = session_store
        self.engine = engine

    def start(
        self,
        mode: QuizMode = "chinese-to-english",
        scope: QuizScope = "all",
    ) -> QuizSession:
        """
        Start a quiz over the current words, replacing any live session.

        Raises:
            EmptySourceError: If there are no words
            ValidationError: If mode or scope is unknown
        """
        session = self.engine.start(self.word_repository.list(), mode=mode, scope=scope)
        replaced = self.session_store.discard_all()
        self.session_store.save(session)

        logger.info(
            "quiz_session_started",
            session_id=session.id.value,
            replaced=replaced,
            settings=session.settings.to_primitive(),
            items=session.total,
        )
        return session

    def get(self, session_id: str) -> QuizSession:
        """
        Get a live session.

        Raises:
            QuizSessionNotFoundError: If the session does not exist
        """
        session = self.session_store.get(QuizSessionId(session_id))
        if session is None:
            raise QuizSessionNotFoundError(session_id)
        return session

    def record_answer(self, session_id: str, text: str) -> QuizSession:
        return self.engine.record_answer(self.get(session_id), text)

    def next(self, session_id: str, text: str | None = None) -> QuizSession:
        return self.engine.next(self.get(session_id), text)

    def prev(self, session_id: str, text: str | None = None) -> QuizSession:
        return self.engine.prev(self.get(session_id), text)

    def reveal_current(self, session_id: str, text: str | None = None) -> QuizSession:
        return self.engine.reveal_current(self.get(session_id), text)

    def reveal_all(self, session_id: str, text: str | None = None) -> QuizSession:
        session = self.engine.reveal_all(self.get(session_id), text)
        logger.info(
            "quiz_answers_revealed",
            session_id=session_id,
            answered=sum(1 for answer in session.answers if answer),
            total=session.total,
        )
        return session

    def resume(self, session_id: str) -> QuizSession:
        return self.engine.resume(self.get(session_id))

    def review(self, session_id: str) -> list[ReviewItem]:
        return self.engine.review(self.get(session_id))

    def restart(
        self,
        session_id: str,
        mode: QuizMode | None = None,
        scope: QuizScope | None = None,
    ) -> QuizSession:
        """
        Replace a session with a fresh one over the current words.

        The old session and all its answers are discarded.

        Raises:
            QuizSessionNotFoundError: If the session does not exist
            EmptySourceError: If there are no words any more
        """
        previous = self.get(session_id)
        session = self.engine.restart(previous, self.word_repository.list(), mode=mode, scope=scope)
        self.session_store.discard(previous.id)
        self.session_store.save(session)

        logger.info(
            "quiz_session_restarted",
            previous_session_id=session_id,
            session_id=session.id.value,
            items=session.total,
        )
        return session

    def discard(self, session_id: str) -> None:
        """
        Throw a session away.

        Raises:
            QuizSessionNotFoundError: If the session does not exist
        """
        if not self.session_store.discard(QuizSessionId(session_id)):
            raise QuizSessionNotFoundError(session_id)
        logger.info("quiz_session_discarded", session_id=session_id)
