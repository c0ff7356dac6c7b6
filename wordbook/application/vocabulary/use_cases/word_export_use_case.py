"""Use case for exporting the word list as import-compatible text."""

import structlog

from wordbook.application.vocabulary.protocols.word_repository import WordRepositoryProtocol
from wordbook.domain.vocabulary.services.word_export_service import WordExportService

logger = structlog.get_logger(__name__)

DEFAULT_EXPORT_FILENAME = "vocabulary_words.txt"


class WordExportUseCase:
    """Use case for exporting the word list."""

    def __init__(
        self,
        word_repository: WordRepositoryProtocol,
        export_service: WordExportService,
        export_filename: str = DEFAULT_EXPORT_FILENAME,
    ) -> None:
        self.word_repository = word_repository
        self.export_service = export_service
        self.export_filename = export_filename

    def export_text(self) -> str:
        """
        Export every word as one `english,chinese` line, in list order.

        Returns:
            Export text (empty string when there are no words)
        """
        words = self.word_repository.list()
        logger.info("words_exported", count=len(words))
        return self.export_service.to_text(words)
