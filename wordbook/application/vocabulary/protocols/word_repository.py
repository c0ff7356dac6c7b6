"""Protocol for the Word repository in the vocabulary context."""

from collections.abc import Iterable
from typing import Protocol

from wordbook.domain.vocabulary.entities.word_entry import WordEntry, WordId


class WordRepositoryProtocol(Protocol):
    """Protocol for word list operations."""

    async def load(self) -> None:
        """Load persisted words, falling back to an empty list."""
        ...

    def list(self) -> tuple[WordEntry, ...]:
        """
        Snapshot of the current words in insertion order.

        Returns:
            Immutable tuple of immutable entries
        """
        ...

    def find_by_id(self, word_id: WordId) -> WordEntry | None:
        """Find a word by ID, None if absent."""
        ...

    def count(self) -> int:
        ...

    async def add(self, english: str, chinese: str) -> WordEntry:
        """
        Add and persist one word.

        Raises:
            ValidationError: If either field is empty
            DuplicateError: If the english word already exists
            PersistenceError: If the write fails (nothing is changed)
        """
        ...

    async def delete(self, word_id: WordId) -> None:
        """Remove a word if present and persist. Idempotent."""
        ...

    async def import_batch(self, pairs: Iterable[tuple[str, str]]) -> int:
        """
        Add every valid, non-duplicate pair and persist once.

        Returns:
            Number of accepted pairs
        """
        ...

    async def clear(self) -> int:
        """Remove every word and persist; returns how many were removed."""
        ...
