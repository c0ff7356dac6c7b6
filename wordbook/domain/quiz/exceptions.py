"""Quiz module domain exceptions."""

from wordbook.domain.common.exceptions import DomainError


class EmptySourceError(DomainError):
    """Raised when a quiz is started with no words to draw from."""

    def __init__(self) -> None:
        super().__init__("Cannot start a quiz without any words")


class QuizStateError(DomainError):
    """Raised when a quiz operation is not allowed in the session's current phase."""

    def __init__(self, operation: str, phase: str) -> None:
        super().__init__(
            f"Cannot {operation} while the quiz is {phase}",
            {"operation": operation, "phase": phase},
        )
        self.operation = operation
        self.phase = phase
