"""Use case for searching the word list."""

from wordbook.application.vocabulary.protocols.word_repository import WordRepositoryProtocol
from wordbook.domain.vocabulary.entities.word_entry import WordEntry


class WordSearchUseCase:
    """Filter the word list by a search term."""

    def __init__(self, word_repository: WordRepositoryProtocol) -> None:
        self.word_repository = word_repository

    def search(self, term: str | None = None) -> list[WordEntry]:
        """
        Words whose english or chinese text contains the term, ignoring case.

        A missing or blank term returns every word. Results keep list order.
        """
        words = self.word_repository.list()
        if term is None or not term.strip():
            return list(words)
        needle = term.strip()
        return [word for word in words if word.matches(needle)]

    def count(self) -> int:
        """Total number of stored words, regardless of any search."""
        return self.word_repository.count()
