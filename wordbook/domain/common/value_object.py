"""
Base class for Value Objects.

Value Objects are immutable and defined by their attributes rather than by
identity. Subclasses are frozen dataclasses, which supplies value equality
and hashing.

Example:
    @dataclass(frozen=True)
    class QuizSettings(ValueObject):
        mode: QuizMode
        scope: QuizScope
"""

from dataclasses import asdict, fields, is_dataclass


class ValueObject:
    """
    Base class for Value Objects in the domain model.

    Value Objects are:
    - Immutable (declared with @dataclass(frozen=True))
    - Compared by value
    - Self-validating (validation in __post_init__)
    """

    def to_primitive(self) -> object:
        """
        Convert to a primitive for serialization or logging.

        Single-field objects collapse to that field's value, others to a dict.
        """
        if not is_dataclass(self):
            raise TypeError(f"{self.__class__.__name__} must be a dataclass")
        own_fields = fields(self)
        if len(own_fields) == 1:
            return getattr(self, own_fields[0].name)
        return asdict(self)
