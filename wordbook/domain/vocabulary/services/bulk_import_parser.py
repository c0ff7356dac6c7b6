"""
Parser for bulk word import text.

The import format is plain UTF-8 text with one word per line:

    apple,苹果
    fine, it's okay, really

Only the first comma separates the fields, so the chinese side may itself
contain commas. Deduplication is not done here; the repository owns it.
"""

from wordbook.domain.vocabulary.entities.word_entry import WordPair

DELIMITER = ","


class BulkImportParser:
    """Turns raw delimited text into candidate word pairs, in line order."""

    delimiter = DELIMITER

    def parse(self, text: str) -> list[WordPair]:
        """
        Parse bulk import text.

        Lines that are blank, have no delimiter, or have an empty field
        after trimming are skipped.

        Args:
            text: Raw import text

        Returns:
            Candidate pairs in source line order
        """
        pairs: list[WordPair] = []
        for line in text.split("\n"):
            stripped = line.strip()
            if not stripped:
                continue

            pair = self.parse_line(stripped)
            if pair is not None:
                pairs.append(pair)
        return pairs

    def parse_line(self, line: str) -> WordPair | None:
        """Parse one line, returning None when it is not a usable pair."""
        english, sep, chinese = line.partition(self.delimiter)
        if not sep:
            return None

        english = english.strip()
        chinese = chinese.strip()
        if not english or not chinese:
            return None
        return WordPair(english, chinese)
