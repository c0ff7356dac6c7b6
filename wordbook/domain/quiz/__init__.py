"""
Quiz bounded context - Domain layer.

This context handles self-quizzing over the word list:
- Word selection and shuffling for a session
- Per-item answer capture and navigation
- Revealing answers and reviewing them side by side

There is no grading: the user's text is only ever shown next to the
correct answer.

Entities:
- QuizSession: one quiz attempt's ephemeral working state
"""

from .entities.quiz_session import (
    QuizMode,
    QuizPhase,
    QuizScope,
    QuizSession,
    QuizSessionId,
    QuizSettings,
    ReviewItem,
)
from .exceptions import EmptySourceError, QuizStateError

__all__ = [
    "EmptySourceError",
    "QuizMode",
    "QuizPhase",
    "QuizScope",
    "QuizSession",
    "QuizSessionId",
    "QuizSettings",
    "QuizStateError",
    "ReviewItem",
]
