"""
Utility functions for Finance Tracker MCP.
"""

from finance_tracker_mcp.utils.date_utils import today_iso, validate_iso_date

__all__ = [
    "today_iso",
    "validate_iso_date",
]
