"""JSON file storage for the word list."""

import asyncio
import json
import os
import tempfile
from pathlib import Path
from typing import Any

import structlog

from wordbook.application.vocabulary.exceptions import PersistenceError

logger = structlog.get_logger(__name__)

DEFAULT_STORAGE_KEY = "vocabularyWords"


class JsonFileWordStorage:
    """
    Stores the word list as a JSON document on disk.

    The document is an object with the record array under the storage key:

        {"vocabularyWords": [{"id": ..., "english": ..., "chinese": ..., "createdAt": ...}]}

    Writes go to a temporary file that then replaces the document, so a
    failed write never leaves a half-written file behind. Blocking file I/O
    runs in a worker thread.
    """

    def __init__(self, path: Path | str, storage_key: str = DEFAULT_STORAGE_KEY) -> None:
        self.path = Path(path)
        self.storage_key = storage_key

    async def load(self) -> list[dict[str, Any]] | None:
        return await asyncio.to_thread(self._read)

    async def save(self, records: list[dict[str, Any]]) -> None:
        await asyncio.to_thread(self._write, records)

    def _read(self) -> list[dict[str, Any]] | None:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("word_storage_file_missing", path=str(self.path))
            return None
        except OSError as e:
            raise PersistenceError(f"Cannot read {self.path}: {e}", operation="load") from e

        try:
            document = json.loads(raw)
        except json.JSONDecodeError as e:
            raise PersistenceError(f"Corrupt word file {self.path}: {e}", operation="load") from e

        if not isinstance(document, dict):
            raise PersistenceError(f"Corrupt word file {self.path}", operation="load")

        records = document.get(self.storage_key)
        if records is None:
            return None
        if not isinstance(records, list):
            raise PersistenceError(
                f"Expected a list under '{self.storage_key}' in {self.path}", operation="load"
            )
        return records

    def _write(self, records: list[dict[str, Any]]) -> None:
        document = {self.storage_key: records}
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                json.dump(document, tmp, ensure_ascii=False, indent=2)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, self.path)
        except (OSError, TypeError, ValueError) as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceError(f"Cannot write {self.path}: {e}", operation="save") from e

        logger.debug("word_storage_written", path=str(self.path), count=len(records))
