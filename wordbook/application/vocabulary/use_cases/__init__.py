"""Vocabulary use cases."""

from .word_export_use_case import WordExportUseCase
from .word_import_use_case import WordImportUseCase
from .word_management_use_case import WordManagementUseCase
from .word_search_use_case import WordSearchUseCase

__all__ = [
    "WordExportUseCase",
    "WordImportUseCase",
    "WordManagementUseCase",
    "WordSearchUseCase",
]
