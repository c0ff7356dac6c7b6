"""Word storage adapters."""

from .in_memory_storage import InMemoryWordStorage
from .json_file_storage import DEFAULT_STORAGE_KEY, JsonFileWordStorage

__all__ = ["DEFAULT_STORAGE_KEY", "InMemoryWordStorage", "JsonFileWordStorage"]
