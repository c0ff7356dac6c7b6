"""Tests for WordEntry entity."""

from dataclasses import FrozenInstanceError
from datetime import UTC, datetime

import pytest

from wordbook.domain.common.exceptions import ValidationError
from wordbook.domain.vocabulary.entities.word_entry import WordEntry, WordId


class TestWordEntry:
    """Test suite for WordEntry entity."""

    def test_create_trims_fields(self) -> None:
        entry = WordEntry.create("  apple ", "\t苹果 ")
        assert entry.english == "apple"
        assert entry.chinese == "苹果"

    def test_create_assigns_unique_ids(self) -> None:
        first = WordEntry.create("apple", "苹果")
        second = WordEntry.create("apple", "苹果")
        assert first.id != second.id
        assert first != second

    def test_create_sets_timestamp(self) -> None:
        before = datetime.now(UTC)
        entry = WordEntry.create("apple", "苹果")
        assert before <= entry.created_at <= datetime.now(UTC)

    @pytest.mark.parametrize(
        ("english", "chinese", "field"),
        [
            ("", "苹果", "english"),
            ("   ", "苹果", "english"),
            ("apple", "", "chinese"),
            ("apple", " \t ", "chinese"),
        ],
    )
    def test_create_rejects_empty_fields(self, english: str, chinese: str, field: str) -> None:
        with pytest.raises(ValidationError) as exc_info:
            WordEntry.create(english, chinese)
        assert exc_info.value.field == field

    def test_is_frozen(self) -> None:
        entry = WordEntry.create("apple", "苹果")
        with pytest.raises(FrozenInstanceError):
            entry.english = "pear"  # type: ignore[misc]

    def test_english_key_ignores_case(self) -> None:
        assert WordEntry.create("Apple", "苹果").english_key == "apple"
        assert WordEntry.create("APPLE", "x").english_key == WordEntry.create("apple", "y").english_key

    def test_equality_is_by_id(self) -> None:
        now = datetime.now(UTC)
        first = WordEntry.create_with_id(WordId("1"), "apple", "苹果", now)
        second = WordEntry.create_with_id(WordId("1"), "pear", "梨", now)
        assert first == second
        assert hash(first) == hash(second)

    def test_create_with_id_keeps_legacy_id(self) -> None:
        created = datetime(2024, 1, 1, tzinfo=UTC)
        entry = WordEntry.create_with_id(WordId("1704067200000"), " cat ", "猫", created)
        assert entry.id.value == "1704067200000"
        assert entry.english == "cat"
        assert entry.created_at == created

    def test_matches_english_or_chinese(self) -> None:
        entry = WordEntry.create("Apple", "苹果")
        assert entry.matches("app")
        assert entry.matches("PLE")
        assert entry.matches("苹")
        assert not entry.matches("pear")

    def test_to_pair(self) -> None:
        entry = WordEntry.create("apple", "苹果")
        assert entry.to_pair() == ("apple", "苹果")


class TestWordId:
    def test_rejects_empty(self) -> None:
        with pytest.raises(ValueError):
            WordId("")

    def test_generate_is_unique(self) -> None:
        assert WordId.generate() != WordId.generate()
