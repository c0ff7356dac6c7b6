"""Vocabulary domain services."""

from .bulk_import_parser import BulkImportParser
from .deduplication_service import WordDeduplicationService
from .word_export_service import WordExportService

__all__ = ["BulkImportParser", "WordDeduplicationService", "WordExportService"]
