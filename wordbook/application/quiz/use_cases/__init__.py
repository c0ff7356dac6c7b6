"""Quiz use cases."""

from .quiz_use_case import QuizUseCase

__all__ = ["QuizUseCase"]
