"""
Operation model for Finance Tracker data.
"""

from pydantic import BaseModel, Field, field_validator

from finance_tracker_mcp.utils.date_utils import ISO_DATE_PATTERN, validate_iso_date

# Largest value SQLite's signed 64-bit INTEGER can hold
MAX_VALUE = 2**63 - 1


class OperationFields(BaseModel):
    """Caller-supplied fields of an operation."""

    model_config = {"strict": True}

    subcategory_id: int
    date: str = Field(pattern=ISO_DATE_PATTERN)
    value: int = Field(ge=0, le=MAX_VALUE)  # smallest currency unit, e.g. cents

    @field_validator("date")
    @classmethod
    def validate_calendar_date(cls, v: str) -> str:
        """Reject well-formed but impossible dates such as 2024-02-30."""
        return validate_iso_date(v)


class Operation(OperationFields):
    """
    A single financial operation recorded under a subcategory.

    The value is a non-negative magnitude; whether it is income or an
    expense is up to the caller.
    """

    id: int
