"""Exceptions for vocabulary use cases and storage."""

from wordbook.exceptions import WordbookError


class PersistenceError(WordbookError):
    """Word storage could not be read or written."""

    def __init__(self, message: str, operation: str = "save") -> None:
        self.operation = operation
        super().__init__(message, status_code=503)
