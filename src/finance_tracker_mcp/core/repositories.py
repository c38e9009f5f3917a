"""
Repositories translating between domain records and table rows.

Each repository works on a connection obtained from
``FinanceDatabase.acquire()`` and never manages transactions itself.
Rows are turned into records without re-running the write-side checks:
databases written by older versions may hold dates or values those
checks reject.
"""

import logging
import sqlite3
from typing import List

from finance_tracker_mcp.models.category import Category
from finance_tracker_mcp.models.operation import Operation
from finance_tracker_mcp.models.subcategory import Subcategory

logger = logging.getLogger(__name__)


class CategoryRepository:
    """CRUD for the ``category`` table."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def create(self, name: str) -> int:
        """Insert a category and return its new id."""
        cur = self.conn.execute("INSERT INTO category (name) VALUES (?)", (name,))
        return cur.lastrowid

    def list(self) -> List[Category]:
        rows = self.conn.execute("SELECT id, name FROM category ORDER BY id").fetchall()
        return [Category.model_construct(id=row[0], name=row[1]) for row in rows]

    def update(self, category_id: int, name: str) -> None:
        """Rename a category. A missing id is a no-op."""
        cur = self.conn.execute(
            "UPDATE category SET name = ? WHERE id = ?", (name, category_id)
        )
        if cur.rowcount == 0:
            logger.debug("update: no category with id=%s", category_id)

    def delete(self, category_id: int) -> None:
        """
        Delete a category.

        Its subcategories and their operations go with it through
        ON DELETE CASCADE, in the same statement. A missing id is a no-op.
        """
        cur = self.conn.execute("DELETE FROM category WHERE id = ?", (category_id,))
        if cur.rowcount == 0:
            logger.debug("delete: no category with id=%s", category_id)


class SubcategoryRepository:
    """CRUD for the ``subcategory`` table."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def create(self, category_id: int, name: str) -> int:
        """Insert a subcategory under an existing category and return its id."""
        cur = self.conn.execute(
            "INSERT INTO subcategory (category_id, name) VALUES (?, ?)",
            (category_id, name),
        )
        return cur.lastrowid

    def list(self) -> List[Subcategory]:
        rows = self.conn.execute(
            "SELECT id, category_id, name FROM subcategory ORDER BY id"
        ).fetchall()
        return [
            Subcategory.model_construct(id=row[0], category_id=row[1], name=row[2])
            for row in rows
        ]

    def update(self, subcategory_id: int, name: str) -> None:
        """Rename a subcategory. A missing id is a no-op."""
        cur = self.conn.execute(
            "UPDATE subcategory SET name = ? WHERE id = ?", (name, subcategory_id)
        )
        if cur.rowcount == 0:
            logger.debug("update: no subcategory with id=%s", subcategory_id)

    def delete(self, subcategory_id: int) -> None:
        """Delete a subcategory and, by cascade, its operations."""
        cur = self.conn.execute(
            "DELETE FROM subcategory WHERE id = ?", (subcategory_id,)
        )
        if cur.rowcount == 0:
            logger.debug("delete: no subcategory with id=%s", subcategory_id)


class OperationRepository:
    """Create and list rows of the ``operation`` table."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def create(self, subcategory_id: int, date: str, value: int) -> int:
        """Insert an operation and return its id. The value is stored as given."""
        cur = self.conn.execute(
            "INSERT INTO operation (subcategory_id, date, value) VALUES (?, ?, ?)",
            (subcategory_id, date, value),
        )
        return cur.lastrowid

    def list(self) -> List[Operation]:
        """
        All operations, most recent first.

        Same-date operations are ordered by id descending, so the one
        recorded last comes first.
        """
        rows = self.conn.execute(
            "SELECT id, subcategory_id, date, value FROM operation "
            "ORDER BY date DESC, id DESC"
        ).fetchall()
        return [
            Operation.model_construct(
                id=row[0], subcategory_id=row[1], date=row[2], value=row[3]
            )
            for row in rows
        ]
