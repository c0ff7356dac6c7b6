"""
Errors raised by the wordbook domain.

Each error carries a human-readable ``message`` for API responses and a
``details`` mapping for structured logs. The HTTP layer maps error classes
to status codes, so new errors should subclass the closest existing one.
"""


class DomainError(Exception):
    """A word or quiz rule was broken."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: dict[str, object] = dict(details or {})

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
        return f"{self.message} ({context})"


class ValidationError(DomainError):
    """A value handed to the domain is unusable, e.g. a blank english word."""

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        self.field = field
        self.value = value
        details = {"field": field, "value": value}
        super().__init__(message, {key: item for key, item in details.items() if item is not None})


class EntityNotFoundError(DomainError):
    """No stored entity has the requested id."""

    def __init__(self, entity_type: str, entity_id: object) -> None:
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(
            f"{entity_type} {entity_id} does not exist",
            {"entity_type": entity_type, "entity_id": entity_id},
        )


class BusinessRuleViolationError(DomainError):
    """An operation would break a named rule, such as unique english words."""

    def __init__(self, rule: str, message: str | None = None) -> None:
        self.rule = rule
        super().__init__(message or f"Rule '{rule}' would be broken", {"rule": rule})
