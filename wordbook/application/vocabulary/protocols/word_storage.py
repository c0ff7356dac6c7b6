"""Protocol for the key/value storage backing the word list."""

from typing import Any, Protocol

WordRecord = dict[str, Any]


class WordStorageProtocol(Protocol):
    """
    Storage for the serialized word list.

    The whole collection is kept as one ordered array of
    ``{id, english, chinese, createdAt}`` records under a single key.
    """

    async def load(self) -> list[WordRecord] | None:
        """
        Read the stored records.

        Returns:
            The records, or None when nothing has been stored yet

        Raises:
            PersistenceError: If the storage cannot be read
        """
        ...

    async def save(self, records: list[WordRecord]) -> None:
        """
        Replace the stored records with the given ones.

        Raises:
            PersistenceError: If the write fails
        """
        ...
