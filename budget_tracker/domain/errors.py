"""Error taxonomy for ledger operations."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Machine-readable failure category."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    STORE = "store"


class LedgerError(Exception):
    """Base class for recoverable ledger failures."""

    kind: ErrorKind = ErrorKind.STORE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_operation_error(self) -> "OperationError":
        """Return the serializable form of this error."""
        return OperationError(kind=self.kind, message=self.message)


class ValidationError(LedgerError):
    """Bad or missing user input; nothing was written."""

    kind = ErrorKind.VALIDATION


class NotFoundError(LedgerError):
    """A referenced budget or transaction is absent from the store."""

    kind = ErrorKind.NOT_FOUND


class StoreError(LedgerError):
    """The underlying persistence layer failed."""

    kind = ErrorKind.STORE


@dataclass(frozen=True)
class OperationError:
    """Failure reported to callers instead of an exception.

    Attributes:
        kind: Category of the failure.
        message: Human readable description.
    """

    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a public use case: either a value or an error."""

    value: Any = None
    error: OperationError | None = None

    @property
    def ok(self) -> bool:
        """Return True when the operation succeeded."""
        return self.error is None

    @classmethod
    def success(cls, value: Any = None) -> "OperationResult":
        return cls(value=value)

    @classmethod
    def failure(cls, error: LedgerError) -> "OperationResult":
        return cls(error=error.to_operation_error())


__all__ = [
    "ErrorKind",
    "LedgerError",
    "ValidationError",
    "NotFoundError",
    "StoreError",
    "OperationError",
    "OperationResult",
]
