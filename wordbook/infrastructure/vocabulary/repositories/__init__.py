"""Vocabulary repositories."""

from .word_repository import WordRepository

__all__ = ["WordRepository"]
