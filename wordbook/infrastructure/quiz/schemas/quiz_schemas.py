"""Pydantic schemas for Quiz API request/response validation."""

from pydantic import BaseModel, Field

from wordbook.domain.quiz.entities.quiz_session import QuizMode, QuizPhase, QuizScope


class QuizStartRequest(BaseModel):
    """Schema for starting a quiz."""

    mode: QuizMode = Field("chinese-to-english", description="Which side is the prompt")
    scope: QuizScope = Field("all", description="All words, or a random handful")


class QuizRestartRequest(BaseModel):
    """Schema for restarting a quiz; omitted settings keep the previous ones."""

    mode: QuizMode | None = None
    scope: QuizScope | None = None


class QuizAnswerRequest(BaseModel):
    """Schema for recording the answer to the current item."""

    text: str = Field(..., description="What the user typed")


class QuizDraftRequest(BaseModel):
    """Schema for navigation/reveal calls, carrying what is typed right now."""

    text: str | None = Field(None, description="Current typed answer, recorded first")


class QuizSessionView(BaseModel):
    """
    Schema for a quiz session as the quiz screen sees it.

    The correct answer of the current item is only included once it has
    been revealed or the session is reviewing.
    """

    id: str
    mode: QuizMode
    scope: QuizScope
    phase: QuizPhase
    cursor: int
    total: int
    position: str
    is_first: bool
    is_last: bool
    prompt: str
    draft: str
    revealed: bool
    correct_answer: str | None
    answers: list[str]


class ReviewItemSchema(BaseModel):
    """Schema for one row of the answer review."""

    index: int
    prompt: str
    user_answer: str | None = Field(..., description="None when left unanswered")
    correct_answer: str
    is_current: bool


class QuizReviewResponse(BaseModel):
    """Schema for the answer review."""

    session_id: str
    items: list[ReviewItemSchema]
    answered: int
    total: int


class QuizDiscardResponse(BaseModel):
    """Schema for discarding a quiz session."""

    success: bool
    message: str
