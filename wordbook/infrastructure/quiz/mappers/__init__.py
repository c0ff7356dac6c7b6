"""Quiz mappers."""

from .quiz_mapper import QuizMapper

__all__ = ["QuizMapper"]
