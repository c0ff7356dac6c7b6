"""Vocabulary mappers."""

from .word_mapper import WordMapper

__all__ = ["WordMapper"]
