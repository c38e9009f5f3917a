"""
Pydantic models for Finance Tracker data structures.
"""

from finance_tracker_mcp.models.category import Category, CategoryFields
from finance_tracker_mcp.models.operation import Operation, OperationFields
from finance_tracker_mcp.models.subcategory import Subcategory, SubcategoryFields

__all__ = [
    "Category",
    "CategoryFields",
    "Subcategory",
    "SubcategoryFields",
    "Operation",
    "OperationFields",
]
