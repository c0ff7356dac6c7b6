"""
Domain service for exporting words as bulk import text.
"""

from collections.abc import Iterable

from wordbook.domain.vocabulary.entities.word_entry import WordEntry
from wordbook.domain.vocabulary.services.bulk_import_parser import DELIMITER


class WordExportService:
    """
    Formats words as `english,chinese` lines in the given order.

    The output is always valid input for BulkImportParser.
    """

    def to_lines(self, words: Iterable[WordEntry]) -> list[str]:
        return [f"{word.english}{DELIMITER}{word.chinese}" for word in words]

    def to_text(self, words: Iterable[WordEntry]) -> str:
        """Join the export lines with newlines; no trailing newline."""
        return "\n".join(self.to_lines(words))
