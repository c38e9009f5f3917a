"""
Date utilities for operation dates.
"""

from datetime import date, datetime

ISO_DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


def today_iso() -> str:
    """
    Today's local date as a "YYYY-MM-DD" string.

    Used when an operation is recorded without an explicit date.
    """
    return date.today().isoformat()


def validate_iso_date(value: str) -> str:
    """
    Check that a string is a real calendar date in "YYYY-MM-DD" form.

    Args:
        value: Date string to check

    Returns:
        The same string, unchanged

    Raises:
        ValueError: If the string is not a valid calendar date
    """
    try:
        parsed = datetime.strptime(value, "%Y-%m-%d")
    except ValueError:
        raise ValueError(f"Invalid date: {value!r} (expected YYYY-MM-DD)") from None

    # strptime accepts unpadded fields like "2024-1-5"
    if parsed.strftime("%Y-%m-%d") != value:
        raise ValueError(f"Invalid date: {value!r} (expected YYYY-MM-DD)")
    return value
