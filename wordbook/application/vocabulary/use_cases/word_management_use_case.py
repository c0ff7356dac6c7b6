"""Use case for adding, deleting and clearing words."""

import structlog

from wordbook.application.vocabulary.protocols.word_repository import WordRepositoryProtocol
from wordbook.domain.common.exceptions import EntityNotFoundError
from wordbook.domain.vocabulary.entities.word_entry import WordEntry, WordId

logger = structlog.get_logger(__name__)


class WordManagementUseCase:
    """Use case for single-word changes to the word list."""

    def __init__(self, word_repository: WordRepositoryProtocol) -> None:
        """Initialize use case with repository protocol."""
        self.word_repository = word_repository

    def get_word(self, word_id: str) -> WordEntry:
        """
        Get one word by id.

        Raises:
            EntityNotFoundError: If no word has that id
        """
        word = self.word_repository.find_by_id(WordId(word_id))
        if word is None:
            raise EntityNotFoundError("Word", word_id)
        return word

    async def add_word(self, english: str, chinese: str) -> WordEntry:
        """
        Add a new word.

        Args:
            english: English word
            chinese: Chinese meaning

        Returns:
            Created word entry

        Raises:
            ValidationError: If either field is empty
            DuplicateError: If the english word already exists
            PersistenceError: If the word could not be saved
        """
        return await self.word_repository.add(english, chinese)

    async def delete_word(self, word_id: str) -> None:
        """
        Delete a word. Deleting an unknown id is not an error.

        Raises:
            PersistenceError: If the change could not be saved
        """
        await self.word_repository.delete(WordId(word_id))

    async def clear_words(self) -> int:
        """
        Delete every word.

        Returns:
            How many words were removed
        """
        removed = await self.word_repository.clear()
        logger.info("words_cleared_by_user", removed=removed)
        return removed
