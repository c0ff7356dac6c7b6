"""
Base class for Entities.

Entities are objects that have a distinct identity that runs through time
and different states. Two entities are equal if they have the same identity,
regardless of their attributes.

Example:
    @dataclass(frozen=True, eq=False)
    class WordEntry(Entity[WordId]):
        id: WordId
        english: str
        chinese: str
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar
from uuid import uuid4

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Base class for strongly-typed entity identifiers.

    Identifiers are opaque strings. Fresh ones are uuid4 hex strings, but ids
    read back from storage are kept verbatim whatever their format.

    Example:
        @dataclass(frozen=True)
        class WordId(EntityId):
            pass

        word_id = WordId("1700000000000")
        session_id = QuizSessionId("1700000000000")
        # These are different types, preventing accidental mixing
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not self.value:
            raise ValueError(f"{self.__class__.__name__} must be a non-empty string")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> Self:
        """Create a fresh random identifier."""
        return cls(uuid4().hex)

    def to_primitive(self) -> str:
        """Convert to primitive for serialization."""
        return self.value


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Entities are:
    - Defined by identity (not attributes)
    - Have lifecycle (created, modified, deleted)

    Subclasses must have an 'id' attribute of type IdType. Dataclass
    subclasses should pass eq=False so identity equality is kept.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
