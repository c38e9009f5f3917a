"""
Custom exceptions for Finance Tracker MCP server.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Conceptual error categories. Only flattened messages leave the façade."""

    CONSTRAINT_VIOLATION = "constraint_violation"
    NOT_FOUND = "not_found"  # update/delete of a missing id; never raised
    IO_FAILURE = "io_failure"
    FATAL_INIT = "fatal_init"


class FinanceTrackerError(Exception):
    """Base exception for Finance Tracker MCP errors."""

    kind: ErrorKind = ErrorKind.IO_FAILURE
    label: str = "Database error"

    def __str__(self) -> str:
        detail = super().__str__()
        return f"{self.label}: {detail}" if detail else self.label


class ConstraintViolationError(FinanceTrackerError):
    """Raised on a duplicate name or a reference to a nonexistent parent."""

    kind = ErrorKind.CONSTRAINT_VIOLATION
    label = "Constraint violation"


class StorageError(FinanceTrackerError):
    """Raised when the database file is unavailable, corrupted or locked."""

    kind = ErrorKind.IO_FAILURE
    label = "Storage error"


class ConnectionPoisonedError(StorageError):
    """Raised when an earlier operation died while holding the connection."""

    label = "Connection unusable, restart required"


class SchemaInitError(FinanceTrackerError):
    """Raised when the database cannot be opened or its schema created."""

    kind = ErrorKind.FATAL_INIT
    label = "Database initialization failed"


class CommandError(Exception):
    """
    Failure of a single command, as seen by the caller.

    Carries only a human-readable message. The underlying exception,
    if any, is kept as ``__cause__``.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
