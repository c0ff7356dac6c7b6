"""Tests for QuizSession entity."""

import pytest

from wordbook.domain.common.exceptions import DomainError, ValidationError
from wordbook.domain.quiz.entities.quiz_session import QuizSession, QuizSettings
from wordbook.domain.quiz.exceptions import QuizStateError
from wordbook.domain.vocabulary.entities.word_entry import WordEntry


def _make_words() -> list[WordEntry]:
    return [
        WordEntry.create("apple", "苹果"),
        WordEntry.create("banana", "香蕉"),
        WordEntry.create("cherry", "樱桃"),
    ]


def _make_session(mode: str = "chinese-to-english") -> QuizSession:
    return QuizSession.create(_make_words(), QuizSettings(mode=mode))  # type: ignore[arg-type]


class TestQuizSettings:
    def test_defaults(self) -> None:
        settings = QuizSettings()
        assert settings.mode == "chinese-to-english"
        assert settings.scope == "all"

    def test_rejects_unknown_mode(self) -> None:
        with pytest.raises(ValidationError):
            QuizSettings(mode="french-to-english")  # type: ignore[arg-type]

    def test_rejects_unknown_scope(self) -> None:
        with pytest.raises(ValidationError):
            QuizSettings(scope="some")  # type: ignore[arg-type]


class TestQuizSession:
    """Test suite for QuizSession entity."""

    def test_create_starts_active_at_first_item(self) -> None:
        session = _make_session()
        assert session.is_active
        assert session.cursor == 0
        assert session.answers == ["", "", ""]
        assert session.draft == ""
        assert not session.revealed
        assert session.position == "1/3"
        assert session.is_first
        assert not session.is_last

    def test_requires_items(self) -> None:
        with pytest.raises(DomainError):
            QuizSession.create([], QuizSettings())

    def test_chinese_to_english_prompts_with_chinese(self) -> None:
        session = _make_session("chinese-to-english")
        assert session.current_prompt == "苹果"
        assert session.current_answer == "apple"

    def test_english_to_chinese_prompts_with_english(self) -> None:
        session = _make_session("english-to-chinese")
        assert session.current_prompt == "apple"
        assert session.current_answer == "苹果"

    def test_move_commits_draft_and_restores_answer(self) -> None:
        session = _make_session()
        session.type_answer("apple")
        session.move_to(1)
        assert session.answers[0] == "apple"
        assert session.draft == ""

        session.move_to(0)
        assert session.draft == "apple"

    def test_move_clears_reveal(self) -> None:
        session = _make_session()
        session.reveal()
        assert session.revealed
        session.move_to(1)
        assert not session.revealed

    def test_move_out_of_range(self) -> None:
        session = _make_session()
        with pytest.raises(DomainError):
            session.move_to(3)

    def test_reveal_commits_draft(self) -> None:
        session = _make_session()
        session.type_answer("apel")
        session.reveal()
        assert session.answers[0] == "apel"

    def test_review_marks_unanswered_and_current(self) -> None:
        session = _make_session()
        session.type_answer("apple")
        session.move_to(1)
        session.begin_review()

        items = session.review_items()
        assert [item.prompt for item in items] == ["苹果", "香蕉", "樱桃"]
        assert [item.correct_answer for item in items] == ["apple", "banana", "cherry"]
        assert [item.user_answer for item in items] == ["apple", None, None]
        assert [item.is_current for item in items] == [False, True, False]
        assert items[0].is_answered
        assert not items[1].is_answered

    def test_answers_are_frozen_while_reviewing(self) -> None:
        session = _make_session()
        session.begin_review()
        with pytest.raises(QuizStateError):
            session.type_answer("x")
        with pytest.raises(QuizStateError):
            session.move_to(1)

    def test_review_items_requires_reviewing(self) -> None:
        session = _make_session()
        with pytest.raises(QuizStateError) as exc_info:
            session.review_items()
        assert exc_info.value.phase == "active"

    def test_end_review_requires_reviewing(self) -> None:
        session = _make_session()
        with pytest.raises(QuizStateError):
            session.end_review()

    def test_end_review_returns_to_same_place(self) -> None:
        session = _make_session()
        session.move_to(2)
        session.type_answer("cherry")
        session.begin_review()
        session.end_review()
        assert session.is_active
        assert session.cursor == 2
        assert session.draft == "cherry"
        assert session.answers[2] == "cherry"


class TestQuizSettingsPrimitive:
    def test_to_primitive(self) -> None:
        settings = QuizSettings(mode="english-to-chinese", scope="random")
        assert settings.to_primitive() == {"mode": "english-to-chinese", "scope": "random"}

    def test_value_equality(self) -> None:
        assert QuizSettings() == QuizSettings()
        assert hash(QuizSettings()) == hash(QuizSettings())
