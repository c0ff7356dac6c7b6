"""
Domain service driving quiz sessions.

This is a pure domain service with no infrastructure dependencies. It never
mutates the word list: it works on the snapshot it is handed.
"""

import random
from collections.abc import Sequence

from wordbook.domain.quiz.entities.quiz_session import (
    QuizMode,
    QuizScope,
    QuizSession,
    QuizSettings,
    ReviewItem,
)
from wordbook.domain.quiz.exceptions import EmptySourceError
from wordbook.domain.vocabulary.entities.word_entry import WordEntry

RANDOM_QUIZ_SIZE = 10


class QuizSessionEngine:
    """
    State machine for a quiz: configuring -> active <-> reviewing.

    Selection and shuffling use the injected random.Random, so a seeded
    generator gives reproducible sessions. Shuffling is a uniform
    Fisher-Yates permutation (random.shuffle), and random scope samples
    without replacement (random.sample).

    Operations that accept an optional ``text`` treat it as what the user
    currently has typed for the current item; it is recorded before the
    operation takes effect so no typed answer is lost.
    """

    def __init__(self, rng: random.Random | None = None, random_size: int = RANDOM_QUIZ_SIZE):
        if random_size < 1:
            raise ValueError("random_size must be at least 1")
        self.rng = rng or random.Random()
        self.random_size = random_size

    def select(self, words: Sequence[WordEntry], scope: QuizScope) -> list[WordEntry]:
        """
        Pick the session's items and shuffle them.

        Args:
            words: Snapshot of the word list
            scope: "all" for every word, "random" for up to random_size words

        Returns:
            A new list; `words` is left untouched
        """
        if scope == "random":
            selected = self.rng.sample(list(words), min(self.random_size, len(words)))
        else:
            selected = list(words)
        self.rng.shuffle(selected)
        return selected

    def start(
        self,
        words: Sequence[WordEntry],
        mode: QuizMode = "chinese-to-english",
        scope: QuizScope = "all",
    ) -> QuizSession:
        """
        Start a new session.

        Raises:
            EmptySourceError: If there are no words
            ValidationError: If mode or scope is unknown
        """
        settings = QuizSettings(mode=mode, scope=scope)
        if not words:
            raise EmptySourceError()
        return QuizSession.create(self.select(words, settings.scope), settings)

    def record_answer(self, session: QuizSession, text: str) -> QuizSession:
        """Overwrite the current item's answer."""
        session.type_answer(text)
        session.commit_answer()
        return session

    def _take_draft(self, session: QuizSession, text: str | None) -> None:
        if text is not None:
            session.type_answer(text)

    def next(self, session: QuizSession, text: str | None = None) -> QuizSession:
        """Record the current answer and move forward; no-op on the last item."""
        session.require_phase("active", "navigate")
        self._take_draft(session, text)
        if not session.is_last:
            session.move_to(session.cursor + 1)
        return session

    def prev(self, session: QuizSession, text: str | None = None) -> QuizSession:
        """Record the current answer and move back; no-op on the first item."""
        session.require_phase("active", "navigate")
        self._take_draft(session, text)
        if not session.is_first:
            session.move_to(session.cursor - 1)
        return session

    def reveal_current(self, session: QuizSession, text: str | None = None) -> QuizSession:
        """Record the current answer and show the correct answer for this item only."""
        self._take_draft(session, text)
        session.reveal()
        return session

    def reveal_all(self, session: QuizSession, text: str | None = None) -> QuizSession:
        """Record the current answer and switch to reviewing every answer."""
        self._take_draft(session, text)
        session.begin_review()
        return session

    def resume(self, session: QuizSession) -> QuizSession:
        """Leave review, keeping the cursor and every recorded answer."""
        session.end_review()
        return session

    def restart(
        self,
        session: QuizSession,
        words: Sequence[WordEntry],
        mode: QuizMode | None = None,
        scope: QuizScope | None = None,
    ) -> QuizSession:
        """
        Start over with a fresh selection, discarding every prior answer.

        Mode and scope default to the previous session's settings.
        """
        return self.start(
            words,
            mode=mode if mode is not None else session.settings.mode,
            scope=scope if scope is not None else session.settings.scope,
        )

    def review(self, session: QuizSession) -> list[ReviewItem]:
        """Read-only rows for the review screen (reviewing phase only)."""
        return session.review_items()
