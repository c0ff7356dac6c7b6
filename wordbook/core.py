import random

from dependency_injector import containers, providers

from wordbook.application.quiz.use_cases.quiz_use_case import QuizUseCase
from wordbook.application.vocabulary.use_cases.word_export_use_case import WordExportUseCase
from wordbook.application.vocabulary.use_cases.word_import_use_case import WordImportUseCase
from wordbook.application.vocabulary.use_cases.word_management_use_case import (
    WordManagementUseCase,
)
from wordbook.application.vocabulary.use_cases.word_search_use_case import WordSearchUseCase
from wordbook.config import get_settings
from wordbook.domain.quiz.services.quiz_session_engine import QuizSessionEngine
from wordbook.domain.vocabulary.services.bulk_import_parser import BulkImportParser
from wordbook.domain.vocabulary.services.deduplication_service import WordDeduplicationService
from wordbook.domain.vocabulary.services.word_export_service import WordExportService
from wordbook.infrastructure.quiz.stores.in_memory_quiz_session_store import (
    InMemoryQuizSessionStore,
)
from wordbook.infrastructure.vocabulary.repositories.word_repository import WordRepository
from wordbook.infrastructure.vocabulary.storage.in_memory_storage import InMemoryWordStorage
from wordbook.infrastructure.vocabulary.storage.json_file_storage import JsonFileWordStorage


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    settings = providers.Singleton(get_settings)

    # Storage, selected by STORAGE_BACKEND
    word_storage = providers.Selector(
        settings.provided.STORAGE_BACKEND,
        file=providers.Singleton(
            JsonFileWordStorage,
            path=settings.provided.words_path,
            storage_key=settings.provided.STORAGE_KEY,
        ),
        memory=providers.Singleton(
            InMemoryWordStorage,
            storage_key=settings.provided.STORAGE_KEY,
        ),
    )

    # Domain services (pure domain logic, no storage)
    word_deduplication_service = providers.Factory(WordDeduplicationService)
    bulk_import_parser = providers.Factory(BulkImportParser)
    word_export_service = providers.Factory(WordExportService)
    quiz_rng = providers.Singleton(random.Random)
    quiz_session_engine = providers.Singleton(
        QuizSessionEngine,
        rng=quiz_rng,
        random_size=settings.provided.QUIZ_RANDOM_SIZE,
    )

    # Repositories and stores (process-wide state)
    word_repository = providers.Singleton(
        WordRepository,
        storage=word_storage,
        dedup_service=word_deduplication_service,
    )
    quiz_session_store = providers.Singleton(InMemoryQuizSessionStore)

    # Vocabulary module use cases
    word_management_use_case = providers.Factory(
        WordManagementUseCase,
        word_repository=word_repository,
    )
    word_import_use_case = providers.Factory(
        WordImportUseCase,
        word_repository=word_repository,
        parser=bulk_import_parser,
    )
    word_export_use_case = providers.Factory(
        WordExportUseCase,
        word_repository=word_repository,
        export_service=word_export_service,
        export_filename=settings.provided.EXPORT_FILENAME,
    )
    word_search_use_case = providers.Factory(
        WordSearchUseCase,
        word_repository=word_repository,
    )

    # Quiz module use cases
    quiz_use_case = providers.Factory(
        QuizUseCase,
        word_repository=word_repository,
        session_store=quiz_session_store,
        engine=quiz_session_engine,
    )


# Initialize container
container = Container()
