"""In-memory key/value storage for the word list."""

import json
from typing import Any

from wordbook.application.vocabulary.exceptions import PersistenceError
from wordbook.infrastructure.vocabulary.storage.json_file_storage import DEFAULT_STORAGE_KEY


class InMemoryWordStorage:
    """
    Keeps the serialized word list in a dict, keyed like a device key/value store.

    Values are stored as JSON strings so records go through the same
    serialization as on disk. Used by tests and by the "memory" backend.
    """

    def __init__(self, storage_key: str = DEFAULT_STORAGE_KEY) -> None:
        self.storage_key = storage_key
        self.items: dict[str, str] = {}
        self.save_count = 0

    async def load(self) -> list[dict[str, Any]] | None:
        raw = self.items.get(self.storage_key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise PersistenceError(f"Corrupt value under '{self.storage_key}'", "load") from e

    async def save(self, records: list[dict[str, Any]]) -> None:
        try:
            self.items[self.storage_key] = json.dumps(records, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise PersistenceError(f"Cannot serialize words: {e}") from e
        self.save_count += 1
