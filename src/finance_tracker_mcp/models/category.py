"""
Category model for Finance Tracker data.
"""

from pydantic import BaseModel


class CategoryFields(BaseModel):
    """Caller-supplied fields of a category."""

    model_config = {"strict": True}

    name: str


class Category(CategoryFields):
    """
    Top level of the hierarchy.

    Names are unique across all categories. A category owns its
    subcategories, which are deleted along with it.
    """

    id: int
