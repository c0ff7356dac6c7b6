"""Vocabulary domain entities."""

from .word_entry import WordEntry, WordId, WordPair

__all__ = ["WordEntry", "WordId", "WordPair"]
