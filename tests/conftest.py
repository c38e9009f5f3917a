"""
Pytest configuration and fixtures for finance-tracker-mcp tests.
"""

from pathlib import Path
from typing import Generator

import pytest

from finance_tracker_mcp.core.database import FinanceDatabase
from finance_tracker_mcp.tools.tools import FinanceTrackerTools


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path to a fresh database file for one test."""
    return tmp_path / "finances.db"


@pytest.fixture
def database(db_path: Path) -> Generator[FinanceDatabase, None, None]:
    """Open database with the schema in place."""
    db = FinanceDatabase(db_path)
    yield db
    db.close()


@pytest.fixture
def tools(database: FinanceDatabase) -> FinanceTrackerTools:
    """Command façade over the test database."""
    return FinanceTrackerTools(database)


@pytest.fixture
def groceries(tools: FinanceTrackerTools) -> dict:
    """A "Food" category with a "Groceries" subcategory."""
    category_id = tools.create_category(name="Food")["id"]
    subcategory_id = tools.create_subcategory(category_id=category_id, name="Groceries")["id"]
    return {"category_id": category_id, "subcategory_id": subcategory_id}
