"""Vocabulary ports."""

from .word_repository import WordRepositoryProtocol
from .word_storage import WordStorageProtocol

__all__ = ["WordRepositoryProtocol", "WordStorageProtocol"]
