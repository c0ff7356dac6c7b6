"""
QuizSession entity.
"""

from dataclasses import dataclass, field
from typing import Literal, get_args

from wordbook.domain.common.entity import Entity, EntityId
from wordbook.domain.common.exceptions import DomainError, ValidationError
from wordbook.domain.common.value_object import ValueObject
from wordbook.domain.quiz.exceptions import QuizStateError
from wordbook.domain.vocabulary.entities.word_entry import WordEntry

QuizMode = Literal["chinese-to-english", "english-to-chinese"]
QuizScope = Literal["all", "random"]
QuizPhase = Literal["configuring", "active", "reviewing"]

QUIZ_MODES: tuple[str, ...] = get_args(QuizMode)
QUIZ_SCOPES: tuple[str, ...] = get_args(QuizScope)


@dataclass(frozen=True)
class QuizSessionId(EntityId):
    """Strongly-typed quiz session identifier."""


@dataclass(frozen=True)
class QuizSettings(ValueObject):
    """
    How a quiz is drawn and which side of each word is the prompt.

    chinese-to-english shows the chinese meaning and asks for the english
    word; english-to-chinese does the reverse.
    """

    mode: QuizMode = "chinese-to-english"
    scope: QuizScope = "all"

    def __post_init__(self) -> None:
        if self.mode not in QUIZ_MODES:
            raise ValidationError(f"Unknown quiz mode: {self.mode}", field="mode", value=self.mode)
        if self.scope not in QUIZ_SCOPES:
            raise ValidationError(
                f"Unknown quiz scope: {self.scope}", field="scope", value=self.scope
            )


@dataclass(frozen=True)
class ReviewItem(ValueObject):
    """One row of the answer review: prompt, what the user wrote, and the truth."""

    index: int
    prompt: str
    user_answer: str | None
    correct_answer: str
    is_current: bool = False

    @property
    def is_answered(self) -> bool:
        return self.user_answer is not None


@dataclass(eq=False)
class QuizSession(Entity[QuizSessionId]):
    """
    A single quiz attempt.

    Business Rules:
    - A session always has at least one item
    - There is exactly one answer slot per item, initially empty
    - 0 <= cursor < number of items
    - The draft (text being typed) is committed to the current slot before
      the cursor moves, an answer is revealed, or review begins
    - The reveal flag belongs to the current item only and is cleared on
      navigation
    - Answers can only change while the session is active
    """

    id: QuizSessionId
    items: tuple[WordEntry, ...]
    settings: QuizSettings
    cursor: int = 0
    answers: list[str] = field(default_factory=list)
    draft: str = ""
    revealed: bool = False
    phase: QuizPhase = "active"

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.items:
            raise DomainError("Quiz session must have at least one item")
        if not self.answers:
            self.answers = [""] * len(self.items)
        if len(self.answers) != len(self.items):
            raise DomainError("Quiz session must have one answer slot per item")
        if not 0 <= self.cursor < len(self.items):
            raise DomainError("Quiz cursor is out of range")

    # Read helpers

    @property
    def mode(self) -> QuizMode:
        return self.settings.mode

    @property
    def total(self) -> int:
        return len(self.items)

    @property
    def current_item(self) -> WordEntry:
        return self.items[self.cursor]

    @property
    def is_first(self) -> bool:
        return self.cursor == 0

    @property
    def is_last(self) -> bool:
        return self.cursor == len(self.items) - 1

    @property
    def position(self) -> str:
        """1-based progress, e.g. "3/10"."""
        return f"{self.cursor + 1}/{self.total}"

    @property
    def is_active(self) -> bool:
        return self.phase == "active"

    @property
    def is_reviewing(self) -> bool:
        return self.phase == "reviewing"

    def prompt_for(self, item: WordEntry) -> str:
        """The side of the word shown to the user."""
        return item.chinese if self.mode == "chinese-to-english" else item.english

    def answer_for(self, item: WordEntry) -> str:
        """The side of the word the user is asked to write."""
        return item.english if self.mode == "chinese-to-english" else item.chinese

    @property
    def current_prompt(self) -> str:
        return self.prompt_for(self.current_item)

    @property
    def current_answer(self) -> str:
        return self.answer_for(self.current_item)

    # State changes

    def require_phase(self, phase: QuizPhase, operation: str) -> None:
        """Raise QuizStateError unless the session is in the given phase."""
        if self.phase != phase:
            raise QuizStateError(operation, self.phase)

    def type_answer(self, text: str) -> None:
        """Replace the draft for the current item without committing it."""
        self.require_phase("active", "type an answer")
        self.draft = text

    def commit_answer(self) -> None:
        """Write the draft into the current item's answer slot."""
        self.require_phase("active", "record an answer")
        self.answers[self.cursor] = self.draft

    def move_to(self, index: int) -> None:
        """
        Commit the draft and move the cursor.

        The new item's draft is its previously recorded answer, and its
        answer starts hidden.

        Raises:
            QuizStateError: If the session is not active
            DomainError: If the index is out of range
        """
        self.require_phase("active", "navigate")
        if not 0 <= index < len(self.items):
            raise DomainError("Quiz cursor is out of range")
        self.commit_answer()
        self.cursor = index
        self.draft = self.answers[index]
        self.revealed = False

    def reveal(self) -> None:
        """Commit the draft and show the current item's correct answer."""
        self.commit_answer()
        self.revealed = True

    def begin_review(self) -> None:
        """Commit the draft and show every answer side by side."""
        self.commit_answer()
        self.phase = "reviewing"

    def end_review(self) -> None:
        """Return to the active quiz exactly where the user left off."""
        self.require_phase("reviewing", "resume")
        self.phase = "active"

    def review_items(self) -> list[ReviewItem]:
        """
        Every item with its prompt, recorded answer and correct answer.

        An empty answer slot is reported as None (unanswered).

        Raises:
            QuizStateError: If the session is not reviewing
        """
        self.require_phase("reviewing", "review answers")
        return [
            ReviewItem(
                index=index,
                prompt=self.prompt_for(item),
                user_answer=self.answers[index] or None,
                correct_answer=self.answer_for(item),
                is_current=index == self.cursor,
            )
            for index, item in enumerate(self.items)
        ]

    @classmethod
    def create(cls, items: list[WordEntry], settings: QuizSettings) -> "QuizSession":
        """Create a new active session over already selected and shuffled items."""
        return cls(
            id=QuizSessionId.generate(),
            items=tuple(items),
            settings=settings,
        )
