"""Mapper for stored word record ↔ Domain conversion."""

from typing import Any

from wordbook.domain.vocabulary.entities.word_entry import WordEntry, WordId
from wordbook.infrastructure.vocabulary.schemas.word_schemas import Word, WordEntryRecord


class WordMapper:
    """Mapper for stored word record ↔ Domain conversion."""

    def to_domain(self, record: WordEntryRecord) -> WordEntry:
        """Convert a stored record to a domain entity."""
        return WordEntry.create_with_id(
            id=WordId(record.id),
            english=record.english,
            chinese=record.chinese,
            created_at=record.created_at,
        )

    def to_record(self, entity: WordEntry) -> WordEntryRecord:
        """Convert a domain entity to a stored record."""
        return WordEntryRecord(
            id=entity.id.to_primitive(),
            english=entity.english,
            chinese=entity.chinese,
            created_at=entity.created_at,
        )

    def to_primitive(self, entity: WordEntry) -> dict[str, Any]:
        """Convert a domain entity to the JSON-ready storage dict."""
        return self.to_record(entity).model_dump(mode="json", by_alias=True)

    def from_primitive(self, data: dict[str, Any]) -> WordEntry:
        """
        Convert a JSON storage dict to a domain entity.

        Raises:
            pydantic.ValidationError: If the dict is not a word record
            wordbook.domain.common.ValidationError: If a field is empty
        """
        return self.to_domain(WordEntryRecord.model_validate(data))

    def to_schema(self, entity: WordEntry) -> Word:
        """Convert a domain entity to its API response schema."""
        return Word(
            id=entity.id.to_primitive(),
            english=entity.english,
            chinese=entity.chinese,
            created_at=entity.created_at,
        )
