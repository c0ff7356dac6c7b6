"""Quiz domain entities."""

from .quiz_session import (
    QuizMode,
    QuizPhase,
    QuizScope,
    QuizSession,
    QuizSessionId,
    QuizSettings,
    ReviewItem,
)

__all__ = [
    "QuizMode",
    "QuizPhase",
    "QuizScope",
    "QuizSession",
    "QuizSessionId",
    "QuizSettings",
    "ReviewItem",
]
