"""
MCP tool definitions for Finance Tracker data.

Each tool is one command: it checks argument shapes, runs exactly one
repository operation under the connection guard, and returns a
JSON-shaped result. Every failure surfaces as a CommandError message.
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from pydantic import StrictInt, StrictStr, TypeAdapter, ValidationError

from finance_tracker_mcp.core.database import FinanceDatabase
from finance_tracker_mcp.core.exceptions import CommandError, FinanceTrackerError
from finance_tracker_mcp.core.repositories import (
    CategoryRepository,
    OperationRepository,
    SubcategoryRepository,
)
from finance_tracker_mcp.models.category import CategoryFields
from finance_tracker_mcp.models.operation import OperationFields
from finance_tracker_mcp.models.subcategory import SubcategoryFields
from finance_tracker_mcp.utils.date_utils import ISO_DATE_PATTERN, today_iso

logger = logging.getLogger(__name__)

_record_id = TypeAdapter(StrictInt)
_record_name = TypeAdapter(StrictStr)


def _describe_validation_error(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


class FinanceTrackerTools:
    """Collection of MCP tools for managing Finance Tracker data."""

    def __init__(self, database: FinanceDatabase):
        """
        Initialize tools with a database connection.

        Args:
            database: FinanceDatabase instance
        """
        self.db = database

    @contextmanager
    def _command(self, command: str, /, **arguments: Any) -> Iterator[None]:
        """Log a command call and flatten any failure into a CommandError."""
        logger.info("%s called with %s", command, arguments)
        try:
            yield
        except ValidationError as e:
            message = f"Invalid arguments: {_describe_validation_error(e)}"
            logger.warning("%s rejected: %s", command, message)
            raise CommandError(message) from e
        except FinanceTrackerError as e:
            logger.warning("%s failed: %s", command, e)
            raise CommandError(str(e)) from e

    # Creates

    def create_category(self, name: str) -> Dict[str, int]:
        """
        Create a category.

        Args:
            name: Category name, unique across all categories

        Returns:
            Dict with the new category id
        """
        with self._command("create_category", name=name):
            fields = CategoryFields(name=name)
            with self.db.acquire() as conn:
                new_id = CategoryRepository(conn).create(fields.name)
        logger.info("Category %r created, id=%s", name, new_id)
        return {"id": new_id}

    def create_subcategory(self, category_id: int, name: str) -> Dict[str, int]:
        """
        Create a subcategory under an existing category.

        Args:
            category_id: Owning category id
            name: Subcategory name, unique within the category

        Returns:
            Dict with the new subcategory id
        """
        with self._command("create_subcategory", category_id=category_id, name=name):
            fields = SubcategoryFields(category_id=category_id, name=name)
            with self.db.acquire() as conn:
                new_id = SubcategoryRepository(conn).create(
                    fields.category_id, fields.name
                )
        logger.info(
            "Subcategory %r (category_id=%s) created, id=%s", name, category_id, new_id
        )
        return {"id": new_id}

    def create_operation(
        self,
        subcategory_id: int,
        date: Optional[str] = None,
        value: Optional[int] = None,
    ) -> Dict[str, int]:
        """
        Record an operation under an existing subcategory.

        Args:
            subcategory_id: Owning subcategory id
            date: Operation date (YYYY-MM-DD), defaults to today
            value: Non-negative amount in the smallest currency unit (required)

        Returns:
            Dict with the new operation id
        """
        if date is None:
            date = today_iso()

        with self._command(
            "create_operation", subcategory_id=subcategory_id, date=date, value=value
        ):
            fields = OperationFields(subcategory_id=subcategory_id, date=date, value=value)
            with self.db.acquire() as conn:
                new_id = OperationRepository(conn).create(
                    fields.subcategory_id, fields.date, fields.value
                )
        logger.info("Operation created, id=%s", new_id)
        return {"id": new_id}

    # Listings

    def list_categories(self) -> List[Dict[str, Any]]:
        """List all categories."""
        with self._command("list_categories"):
            with self.db.acquire() as conn:
                categories = CategoryRepository(conn).list()
        return [cat.model_dump(mode="json") for cat in categories]

    def list_subcategories(self) -> List[Dict[str, Any]]:
        """List all subcategories across every category."""
        with self._command("list_subcategories"):
            with self.db.acquire() as conn:
                subcategories = SubcategoryRepository(conn).list()
        return [sub.model_dump(mode="json") for sub in subcategories]

    def list_operations(self) -> List[Dict[str, Any]]:
        """
        List all operations, most recent first.

        Returns:
            Operations ordered by date descending, then id descending
        """
        with self._command("list_operations"):
            with self.db.acquire() as conn:
                operations = OperationRepository(conn).list()
        return [op.model_dump(mode="json") for op in operations]

    # Updates and removals. A nonexistent id is not an error.

    def update_category(self, id: int, name: str) -> None:
        """Rename a category."""
        with self._command("update_category", id=id, name=name):
            category_id = _record_id.validate_python(id)
            name = _record_name.validate_python(name)
            with self.db.acquire() as conn:
                CategoryRepository(conn).update(category_id, name)

    def update_subcategory(self, id: int, name: str) -> None:
        """Rename a subcategory. Its category cannot be changed."""
        with self._command("update_subcategory", id=id, name=name):
            subcategory_id = _record_id.validate_python(id)
            name = _record_name.validate_python(name)
            with self.db.acquire() as conn:
                SubcategoryRepository(conn).update(subcategory_id, name)

    def remove_category(self, id: int) -> None:
        """Delete a category together with its subcategories and their operations."""
        with self._command("remove_category", id=id):
            category_id = _record_id.validate_python(id)
            with self.db.acquire() as conn:
                CategoryRepository(conn).delete(category_id)

    def remove_subcategory(self, id: int) -> None:
        """Delete a subcategory together with its operations."""
        with self._command("remove_subcategory", id=id):
            subcategory_id = _record_id.validate_python(id)
            with self.db.acquire() as conn:
                SubcategoryRepository(conn).delete(subcategory_id)


_ID_PROPERTY = {"type": "integer", "description": "Record ID"}


def create_tool_schemas() -> List[Dict[str, Any]]:
    """
    Create MCP tool schemas for all tools.

    Returns:
        List of tool schema definitions
    """
    return [
        {
            "name": "create_category",
            "description": "Create a category. Category names must be unique.",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "name": {"type": "string", "description": "Category name"},
                },
                "required": ["name"],
            },
        },
        {
            "name": "create_subcategory",
            "description": (
                "Create a subcategory under an existing category. Names must be "
                "unique within the category."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "category_id": {
                        "type": "integer",
                        "description": "ID of the owning category",
                    },
                    "name": {"type": "string", "description": "Subcategory name"},
                },
                "required": ["category_id", "name"],
            },
        },
        {
            "name": "create_operation",
            "description": (
                "Record an operation under an existing subcategory. The value is a "
                "non-negative amount in the smallest currency unit (e.g. cents)."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {
                    "subcategory_id": {
                        "type": "integer",
                        "description": "ID of the owning subcategory",
                    },
                    "date": {
                        "type": "string",
                        "description": "Operation date (YYYY-MM-DD), defaults to today",
                        "pattern": ISO_DATE_PATTERN,
                    },
                    "value": {
                        "type": "integer",
                        "description": "Amount in the smallest currency unit",
                        "minimum": 0,
                    },
                },
                "required": ["subcategory_id", "value"],
            },
        },
        {
            "name": "list_categories",
            "description": "List all categories.",
            "inputSchema": {"type": "object", "properties": {}},
        },
        {
            "name": "list_subcategories",
            "description": "List all subcategories with their category IDs.",
            "inputSchema": {"type": "object", "properties": {}},
        },
        {
            "name": "list_operations",
            "description": (
                "List all operations, most recent first (date descending, then "
                "most recently recorded first)."
            ),
            "inputSchema": {"type": "object", "properties": {}},
        },
        {
            "name": "update_category",
            "description": "Rename a category. Unknown IDs are ignored.",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "id": _ID_PROPERTY,
                    "name": {"type": "string", "description": "New category name"},
                },
                "required": ["id", "name"],
            },
        },
        {
            "name": "update_subcategory",
            "description": "Rename a subcategory. Unknown IDs are ignored.",
            "inputSchema": {
                "type": "object",
                "properties": {
                    "id": _ID_PROPERTY,
                    "name": {"type": "string", "description": "New subcategory name"},
                },
                "required": ["id", "name"],
            },
        },
        {
            "name": "remove_category",
            "description": (
                "Delete a category together with all of its subcategories and "
                "their operations. Unknown IDs are ignored."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {"id": _ID_PROPERTY},
                "required": ["id"],
            },
        },
        {
            "name": "remove_subcategory",
            "description": (
                "Delete a subcategory together with all of its operations. "
                "Unknown IDs are ignored."
            ),
            "inputSchema": {
                "type": "object",
                "properties": {"id": _ID_PROPERTY},
                "required": ["id"],
            },
        },
    ]
