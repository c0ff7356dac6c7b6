"""
Domain service for word deduplication logic.

This is a pure domain service with no infrastructure dependencies.
"""

from collections.abc import Iterable

from wordbook.domain.vocabulary.entities.word_entry import WordEntry, english_key


class WordDeduplicationService:
    """
    Domain service for identifying duplicate words.

    Deduplication is based on english_key - entries whose english text
    matches ignoring case are considered duplicates. The chinese text
    plays no part.
    """

    def find_duplicates(
        self,
        candidates: list[WordEntry],
        existing_keys: set[str],
    ) -> tuple[list[WordEntry], list[WordEntry]]:
        """
        Separate candidate entries into unique and duplicates.

        A candidate is a duplicate if its key is already stored or was
        accepted earlier in the same batch, so the first occurrence wins.

        Args:
            candidates: Entries to check, in batch order
            existing_keys: english keys that already exist

        Returns:
            Tuple of (unique_entries, duplicate_entries), both in batch order
        """
        unique: list[WordEntry] = []
        duplicates: list[WordEntry] = []

        # Track keys we've seen in this batch
        seen_in_batch: set[str] = set(existing_keys)

        for entry in candidates:
            if entry.english_key in seen_in_batch:
                duplicates.append(entry)
            else:
                unique.append(entry)
                seen_in_batch.add(entry.english_key)

        return unique, duplicates

    def is_duplicate(self, english: str, existing: Iterable[WordEntry]) -> bool:
        """Whether an english word collides with any existing entry."""
        key = english_key(english)
        return any(entry.english_key == key for entry in existing)
