"""
Subcategory model for Finance Tracker data.
"""

from pydantic import BaseModel


class SubcategoryFields(BaseModel):
    """Caller-supplied fields of a subcategory."""

    model_config = {"strict": True}

    category_id: int
    name: str


class Subcategory(SubcategoryFields):
    """
    Second level of the hierarchy, owned by exactly one category.

    Names are unique within their category.
    """

    id: int
