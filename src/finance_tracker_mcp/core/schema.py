"""
SQLite schema for the category -> subcategory -> operation hierarchy.
"""

import logging
import sqlite3
from pathlib import Path

from finance_tracker_mcp.core.exceptions import SchemaInitError

logger = logging.getLogger(__name__)

TABLES = ("category", "subcategory", "operation")

SCHEMA = """
CREATE TABLE IF NOT EXISTS category (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL UNIQUE
);
CREATE TABLE IF NOT EXISTS subcategory (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    category_id INTEGER NOT NULL REFERENCES category(id) ON DELETE CASCADE,
    name TEXT NOT NULL,
    UNIQUE(category_id, name)
);
CREATE TABLE IF NOT EXISTS operation (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    subcategory_id INTEGER NOT NULL REFERENCES subcategory(id) ON DELETE CASCADE,
    date TEXT NOT NULL,
    value INTEGER NOT NULL CHECK (value >= 0)
);
"""


def ensure_schema(conn: sqlite3.Connection) -> None:
    """
    Create the tables if they do not exist yet.

    Safe to run against an existing database.

    Raises:
        SchemaInitError: If any CREATE statement fails
    """
    try:
        conn.executescript(SCHEMA)
    except sqlite3.Error as e:
        raise SchemaInitError(str(e)) from e
    logger.info("Schema ready: %s", ", ".join(TABLES))


def open_connection(db_path: Path) -> sqlite3.Connection:
    """
    Open the database file with foreign keys enforced and the schema in place.

    The connection may be used from any thread; callers serialize access.

    Args:
        db_path: Path to the SQLite file (created if missing)

    Returns:
        Open sqlite3 connection

    Raises:
        SchemaInitError: If the file cannot be opened or initialized
    """
    logger.info("Opening database at %s", db_path)
    try:
        conn = sqlite3.connect(str(db_path), check_same_thread=False)
        # Foreign key enforcement is per connection and off by default
        conn.execute("PRAGMA foreign_keys = ON")
    except sqlite3.Error as e:
        raise SchemaInitError(f"cannot open {db_path}: {e}") from e

    try:
        ensure_schema(conn)
    except SchemaInitError:
        conn.close()
        raise
    return conn
