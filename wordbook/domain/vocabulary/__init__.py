"""
Vocabulary bounded context - Domain layer.

This context handles the personal word list:
- Word entry creation and validation
- Case-insensitive deduplication of english words
- Bulk text import parsing and export formatting

Entities:
- WordEntry: an english/chinese word pair with identity and creation time
"""

from .entities.word_entry import WordEntry, WordId, WordPair
from .exceptions import DuplicateError

__all__ = [
    "DuplicateError",
    "WordEntry",
    "WordId",
    "WordPair",
]
