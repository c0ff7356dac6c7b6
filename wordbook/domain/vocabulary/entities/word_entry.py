"""
WordEntry entity for the personal vocabulary list.
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import NamedTuple

from wordbook.domain.common.entity import Entity, EntityId
from wordbook.domain.common.exceptions import ValidationError


@dataclass(frozen=True)
class WordId(EntityId):
    """Strongly-typed word identifier."""


class WordPair(NamedTuple):
    """A candidate (english, chinese) pair, before it becomes an entry."""

    english: str
    chinese: str


def english_key(english: str) -> str:
    """Dedup key for an english word: trimmed and case-folded."""
    return english.strip().casefold()


@dataclass(frozen=True, eq=False)
class WordEntry(Entity[WordId]):
    """
    A single english/chinese word pair.

    Business Rules:
    - English and chinese cannot be empty after trimming
    - Both fields are stored trimmed
    - Two entries are duplicates when their english text matches ignoring case;
      chinese is never compared
    - Entries are immutable once created
    """

    id: WordId
    english: str
    chinese: str
    created_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.english or not self.english.strip():
            raise ValidationError("English word cannot be empty", field="english")
        if not self.chinese or not self.chinese.strip():
            raise ValidationError("Chinese meaning cannot be empty", field="chinese")

    @property
    def english_key(self) -> str:
        """Case-insensitive key used for deduplication."""
        return english_key(self.english)

    def matches(self, term: str) -> bool:
        """Whether the term occurs in the english or chinese text, ignoring case."""
        needle = term.casefold()
        return needle in self.english.casefold() or needle in self.chinese.casefold()

    def to_pair(self) -> WordPair:
        return WordPair(self.english, self.chinese)

    @classmethod
    def create(cls, english: str, chinese: str) -> "WordEntry":
        """
        Create a new word entry with a fresh id and the current time.

        Args:
            english: Raw english text
            chinese: Raw chinese text

        Returns:
            New WordEntry with trimmed fields

        Raises:
            ValidationError: If either field is empty after trimming
        """
        return cls(
            id=WordId.generate(),
            english=(english or "").strip(),
            chinese=(chinese or "").strip(),
            created_at=datetime.now(UTC),
        )

    @classmethod
    def create_with_id(
        cls,
        id: WordId,
        english: str,
        chinese: str,
        created_at: datetime,
    ) -> "WordEntry":
        """Reconstitute a word entry from persistence."""
        return cls(
            id=id,
            english=english.strip(),
            chinese=chinese.strip(),
            created_at=created_at,
        )
