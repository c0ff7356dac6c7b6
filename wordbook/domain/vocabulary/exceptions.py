"""Vocabulary module domain exceptions."""

from wordbook.domain.common.exceptions import BusinessRuleViolationError


class DuplicateError(BusinessRuleViolationError):
    """Raised when a word with the same english text (ignoring case) already exists."""

    def __init__(self, english: str) -> None:
        super().__init__("unique_english", f"Word '{english}' already exists")
        self.english = english
