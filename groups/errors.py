from __future__ import annotations

from enum import Enum

from menu_catalog.catalog import NotFound


class ConsoleError(Exception):
    """Base class for recoverable console errors."""


class IndexOutOfRange(ConsoleError, IndexError):
    def __init__(self, index: object, size: int) -> None:
        super().__init__(f"group index {index} not in [0, {size})")
        self.index = index
        self.size = size


class ValidationReason(str, Enum):
    EMPTY_NAME = "EmptyName"
    NO_SELECTION = "NoSelection"


_MESSAGES = {
    ValidationReason.EMPTY_NAME: "Debe introducir un nombre para el grupo.",
    ValidationReason.NO_SELECTION: "Seleccione al menos una opción final para el grupo.",
}


class ValidationError(ConsoleError, ValueError):
    def __init__(self, reason: ValidationReason) -> None:
        super().__init__(_MESSAGES[reason])
        self.reason = reason

    @property
    def message(self) -> str:
        return _MESSAGES[self.reason]


class EditorStateError(ConsoleError, RuntimeError):
    """Raised when an editing operation runs while no session is open."""


class PersistenceWarning(UserWarning):
    """Store read or write failure. Logged and kept, never raised."""

    def __init__(self, operation: str, detail: str) -> None:
        super().__init__(f"{operation} failed: {detail}")
        self.operation = operation
        self.detail = detail


__all__ = [
    "ConsoleError",
    "EditorStateError",
    "IndexOutOfRange",
    "NotFound",
    "PersistenceWarning",
    "ValidationError",
    "ValidationReason",
]
