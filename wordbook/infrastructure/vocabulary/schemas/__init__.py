"""Vocabulary schemas."""

from .word_schemas import (
    Word,
    WordCreateRequest,
    WordCreateResponse,
    WordDeleteResponse,
    WordEntryRecord,
    WordImportRequest,
    WordImportResponse,
    WordListResponse,
)

__all__ = [
    "Word",
    "WordCreateRequest",
    "WordCreateResponse",
    "WordDeleteResponse",
    "WordEntryRecord",
    "WordImportRequest",
    "WordImportResponse",
    "WordListResponse",
]
