"""Quiz domain services."""

from .quiz_session_engine import RANDOM_QUIZ_SIZE, QuizSessionEngine

__all__ = ["RANDOM_QUIZ_SIZE", "QuizSessionEngine"]
