"""Repository for WordEntry domain entities."""

import asyncio
from collections.abc import Iterable
from typing import Any

import pydantic
import structlog

from wordbook.application.vocabulary.exceptions import PersistenceError
from wordbook.application.vocabulary.protocols.word_storage import WordStorageProtocol
from wordbook.domain.common.exceptions import ValidationError
from wordbook.domain.vocabulary.entities.word_entry import WordEntry, WordId
from wordbook.domain.vocabulary.exceptions import DuplicateError
from wordbook.domain.vocabulary.services.deduplication_service import WordDeduplicationService
from wordbook.infrastructure.vocabulary.mappers.word_mapper import WordMapper

logger = structlog.get_logger(__name__)


class WordRepository:
    """
    Owner of the word list.

    Words are kept in memory, in insertion order, as an immutable tuple.
    Every mutation writes the whole resulting list to storage and only then
    replaces the in-memory tuple, so a failed write leaves both memory and
    storage as they were. Mutations are serialized by a lock so two writes
    are never in flight against the same storage.
    """

    def __init__(
        self,
        storage: WordStorageProtocol,
        dedup_service: WordDeduplicationService | None = None,
    ) -> None:
        self.storage = storage
        self.dedup_service = dedup_service or WordDeduplicationService()
        self.mapper = WordMapper()
        self._words: tuple[WordEntry, ...] = ()
        self._lock = asyncio.Lock()

    async def load(self) -> None:
        """
        Load the persisted words.

        Missing or unreadable storage means there is no prior data: the
        repository starts empty. Individual records that are malformed or
        repeat an earlier english word are dropped.
        """
        async with self._lock:
            try:
                records = await self.storage.load()
            except PersistenceError as e:
                logger.warning("word_storage_load_failed", error=e.message)
                records = None

            self._words = self._restore(records or [])

        logger.info("words_loaded", count=len(self._words))

    def _restore(self, records: Iterable[Any]) -> tuple[WordEntry, ...]:
        entries: list[WordEntry] = []
        invalid = 0
        for record in records:
            try:
                entries.append(self.mapper.from_primitive(record))
            except (pydantic.ValidationError, ValidationError, ValueError, TypeError):
                invalid += 1

        unique, duplicates = self.dedup_service.find_duplicates(entries, set())
        if invalid or duplicates:
            logger.warning(
                "word_records_dropped",
                invalid=invalid,
                duplicates=len(duplicates),
            )
        return tuple(unique)

    async def _commit(self, words: tuple[WordEntry, ...], operation: str) -> None:
        records = [self.mapper.to_primitive(word) for word in words]
        try:
            await self.storage.save(records)
        except PersistenceError as e:
            logger.error("word_storage_save_failed", operation=operation, error=e.message)
            raise
        except Exception as e:
            logger.error("word_storage_save_failed", operation=operation, error=str(e))
            raise PersistenceError(f"Failed to save words: {e}", operation="save") from e
        self._words = words

    async def add(self, english: str, chinese: str) -> WordEntry:
        """
        Add a word at the end of the list and persist.

        Args:
            english: English word (trimmed)
            chinese: Chinese meaning (trimmed)

        Returns:
            The new word entry

        Raises:
            ValidationError: If either field is empty
            DuplicateError: If the english word already exists, ignoring case
            PersistenceError: If the write fails
        """
        async with self._lock:
            entry = WordEntry.create(english, chinese)
            if self.dedup_service.is_duplicate(entry.english, self._words):
                raise DuplicateError(entry.english)
            await self._commit((*self._words, entry), "add")

        logger.info("word_added", word_id=entry.id.value, english=entry.english)
        return entry

    async def delete(self, word_id: WordId) -> None:
        """
        Remove the word with this id, if any, and persist.

        Deleting an unknown id leaves the words unchanged.

        Raises:
            PersistenceError: If the write fails
        """
        async with self._lock:
            remaining = tuple(word for word in self._words if word.id != word_id)
            removed = len(self._words) - len(remaining)
            await self._commit(remaining, "delete")

        logger.info("word_deleted", word_id=word_id.value, removed=removed)

    async def import_batch(self, pairs: Iterable[tuple[str, str]]) -> int:
        """
        Add many words at once.

        Each pair is validated like add(). Pairs that are invalid, already
        stored, or repeat an english word accepted earlier in the batch are
        skipped. Accepted words keep their batch order and are persisted in
        a single write; nothing is written when none are accepted.

        Args:
            pairs: (english, chinese) candidates

        Returns:
            Number of accepted words

        Raises:
            PersistenceError: If the write fails (nothing is added)
        """
        async with self._lock:
            candidates: list[WordEntry] = []
            for english, chinese in pairs:
                try:
                    candidates.append(WordEntry.create(english, chinese))
                except ValidationError:
                    continue

            existing_keys = {word.english_key for word in self._words}
            unique, duplicates = self.dedup_service.find_duplicates(candidates, existing_keys)
            if unique:
                await self._commit((*self._words, *unique), "import")

        logger.info(
            "word_batch_imported",
            accepted=len(unique),
            duplicates=len(duplicates),
        )
        return len(unique)

    async def clear(self) -> int:
        """
        Remove every word and persist the empty list.

        Returns:
            How many words were removed

        Raises:
            PersistenceError: If the write fails
        """
        async with self._lock:
            removed = len(self._words)
            await self._commit((), "clear")

        logger.info("words_cleared", removed=removed)
        return removed

    def find_by_id(self, word_id: WordId) -> WordEntry | None:
        """Find a word by ID."""
        for word in self._words:
            if word.id == word_id:
                return word
        return None

    def count(self) -> int:
        return len(self._words)

    def list(self) -> tuple[WordEntry, ...]:
        """
        Snapshot of the committed words in insertion order.

        The tuple and its entries are immutable, so callers cannot change
        the repository through it.
        """
        return self._words
