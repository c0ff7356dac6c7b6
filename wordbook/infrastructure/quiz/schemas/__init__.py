"""Quiz schemas."""

from .quiz_schemas import (
    QuizAnswerRequest,
    QuizDiscardResponse,
    QuizDraftRequest,
    QuizRestartRequest,
    QuizReviewResponse,
    QuizSessionView,
    QuizStartRequest,
    ReviewItemSchema,
)

__all__ = [
    "QuizAnswerRequest",
    "QuizDiscardResponse",
    "QuizDraftRequest",
    "QuizRestartRequest",
    "QuizReviewResponse",
    "QuizSessionView",
    "QuizStartRequest",
    "ReviewItemSchema",
]
