"""Pydantic schemas for Word API request/response validation and storage records."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class WordEntryRecord(BaseModel):
    """
    Stored shape of one word: ``{id, english, chinese, createdAt}``.

    Accepts either ``createdAt`` or ``created_at`` on input and always
    writes ``createdAt``.
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    id: str = Field(..., min_length=1)
    english: str
    chinese: str
    created_at: datetime = Field(..., alias="createdAt")


class WordBase(BaseModel):
    """Base schema for Word."""

    english: str = Field(..., min_length=1, description="English word")
    chinese: str = Field(..., min_length=1, description="Chinese meaning")


class WordCreateRequest(WordBase):
    """Schema for adding a word."""


class Word(WordBase):
    """Schema for Word response."""

    id: str
    created_at: datetime


class WordCreateResponse(BaseModel):
    """Schema for word creation response."""

    success: bool = Field(..., description="Whether the creation was successful")
    message: str = Field(..., description="Response message")
    word: Word = Field(..., description="Created word")


class WordListResponse(BaseModel):
    """Schema for the word list, optionally filtered by a search term."""

    words: list[Word]
    total: int = Field(..., description="Number of words stored")
    matched: int = Field(..., description="Number of words in this response")


class WordImportRequest(BaseModel):
    """Schema for bulk import: one `english,chinese` pair per line."""

    text: str = Field(..., description="Raw import text")


class WordImportResponse(BaseModel):
    """Schema for bulk import response."""

    success: bool
    message: str
    imported: int = Field(..., description="Number of words actually added")


class WordDeleteResponse(BaseModel):
    """Schema for deletion responses."""

    success: bool
    message: str
