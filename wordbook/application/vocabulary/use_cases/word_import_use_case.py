"""Use case for bulk importing words from delimited text."""

import structlog

from wordbook.application.vocabulary.protocols.word_repository import WordRepositoryProtocol
from wordbook.domain.vocabulary.services.bulk_import_parser import BulkImportParser

logger = structlog.get_logger(__name__)


class WordImportUseCase:
    """Use case for bulk importing words from delimited text."""

    def __init__(
        self,
        word_repository: WordRepositoryProtocol,
        parser: BulkImportParser,
    ) -> None:
        """Initialize use case with the repository and parser."""
        self.word_repository = word_repository
        self.parser = parser

    async def import_text(self, text: str) -> int:
        """
        Import every usable line of `english,chinese` text.

        Malformed lines, invalid pairs and duplicates (against the stored
        words or earlier lines of the same text) are skipped silently.

        Args:
            text: Raw import text, one word per line

        Returns:
            Number of words actually added

        Raises:
            PersistenceError: If the import could not be saved
        """
        pairs = self.parser.parse(text)
        imported = await self.word_repository.import_batch(pairs)

        logger.info(
            "words_imported",
            parsed=len(pairs),
            imported=imported,
            skipped=len(pairs) - imported,
        )
        return imported
