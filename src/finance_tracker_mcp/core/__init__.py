"""
Core functionality for Finance Tracker MCP.
"""

from finance_tracker_mcp.core.database import FinanceDatabase
from finance_tracker_mcp.core.exceptions import (
    CommandError,
    ConnectionPoisonedError,
    ConstraintViolationError,
    ErrorKind,
    FinanceTrackerError,
    SchemaInitError,
    StorageError,
)
from finance_tracker_mcp.core.repositories import (
    CategoryRepository,
    OperationRepository,
    SubcategoryRepository,
)
from finance_tracker_mcp.core.schema import ensure_schema, open_connection

__all__ = [
    "FinanceDatabase",
    "CategoryRepository",
    "SubcategoryRepository",
    "OperationRepository",
    "ensure_schema",
    "open_connection",
    "CommandError",
    "ConnectionPoisonedError",
    "ConstraintViolationError",
    "ErrorKind",
    "FinanceTrackerError",
    "SchemaInitError",
    "StorageError",
]
