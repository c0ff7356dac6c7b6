"""Tests for WordDeduplicationService domain service."""

from wordbook.domain.vocabulary.entities.word_entry import WordEntry
from wordbook.domain.vocabulary.services.deduplication_service import WordDeduplicationService


class TestWordDeduplicationService:
    def test_all_unique(self) -> None:
        service = WordDeduplicationService()
        candidates = [WordEntry.create("cat", "猫"), WordEntry.create("dog", "狗")]
        unique, duplicates = service.find_duplicates(candidates, set())
        assert unique == candidates
        assert duplicates == []

    def test_existing_keys_are_duplicates(self) -> None:
        service = WordDeduplicationService()
        cat = WordEntry.create("Cat", "猫")
        dog = WordEntry.create("dog", "狗")
        unique, duplicates = service.find_duplicates([cat, dog], {"cat"})
        assert unique == [dog]
        assert duplicates == [cat]

    def test_first_occurrence_in_batch_wins(self) -> None:
        service = WordDeduplicationService()
        first = WordEntry.create("cat", "猫")
        second = WordEntry.create("CAT", "猫咪")
        unique, duplicates = service.find_duplicates([first, second], set())
        assert unique == [first]
        assert duplicates == [second]

    def test_does_not_mutate_existing_keys(self) -> None:
        service = WordDeduplicationService()
        existing = {"cat"}
        service.find_duplicates([WordEntry.create("dog", "狗")], existing)
        assert existing == {"cat"}

    def test_is_duplicate_ignores_case_and_whitespace(self) -> None:
        service = WordDeduplicationService()
        existing = [WordEntry.create("Apple", "苹果")]
        assert service.is_duplicate("  APPLE ", existing)
        assert not service.is_duplicate("apples", existing)

    def test_chinese_is_never_compared(self) -> None:
        service = WordDeduplicationService()
        existing = [WordEntry.create("cat", "猫")]
        assert not service.is_duplicate("kitty", existing)
