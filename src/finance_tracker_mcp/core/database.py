"""
Database access layer for Finance Tracker data.

Owns the single SQLite connection and serializes every use of it.
"""

import logging
import sqlite3
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from finance_tracker_mcp.core.exceptions import (
    ConnectionPoisonedError,
    ConstraintViolationError,
    FinanceTrackerError,
    StorageError,
)
from finance_tracker_mcp.core.schema import open_connection

logger = logging.getLogger(__name__)

DEFAULT_DB_FILENAME = "finances.db"


def default_db_path() -> Path:
    """Default database location in the user's home directory."""
    return Path.home() / DEFAULT_DB_FILENAME


class FinanceDatabase:
    """
    Shared SQLite connection behind a mutex.

    Every read and write goes through ``acquire()``, so at most one
    repository operation runs against storage at any instant.
    """

    def __init__(self, db_path: Optional[Path] = None):
        """
        Open the database and make sure the schema exists.

        Args:
            db_path: Path to the SQLite file.
                    If None, uses ~/finances.db.

        Raises:
            SchemaInitError: If the file cannot be opened or initialized
        """
        if db_path is None:
            db_path = default_db_path()

        self.db_path = Path(db_path)
        self._conn: Optional[sqlite3.Connection] = open_connection(self.db_path)
        self._lock = threading.Lock()
        self._poisoned = False

    @property
    def is_poisoned(self) -> bool:
        return self._poisoned

    @contextmanager
    def acquire(self) -> Iterator[sqlite3.Connection]:
        """
        Get exclusive use of the connection for one unit of work.

        Blocks until the connection is free. The block runs as a single
        transaction: committed on normal exit, rolled back on error. The
        lock is always released.

        Yields:
            The shared sqlite3 connection

        Raises:
            ConstraintViolationError: On sqlite3.IntegrityError
            StorageError: On any other sqlite3.Error, or a closed database
            ConnectionPoisonedError: If an earlier unit of work crashed
        """
        with self._lock:
            if self._poisoned:
                raise ConnectionPoisonedError(
                    "a previous operation failed while holding the connection"
                )
            if self._conn is None:
                raise StorageError("database is closed")

            conn = self._conn
            try:
                with conn:
                    yield conn
            except sqlite3.IntegrityError as e:
                raise ConstraintViolationError(str(e)) from e
            except sqlite3.Error as e:
                raise StorageError(str(e)) from e
            except FinanceTrackerError:
                raise
            except Exception:
                self._poisoned = True
                logger.error("Operation aborted while holding the connection; "
                             "marking it unusable")
                raise

    def close(self) -> None:
        """Close the connection. Later ``acquire()`` calls raise StorageError."""
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.info("Closed database at %s", self.db_path)
