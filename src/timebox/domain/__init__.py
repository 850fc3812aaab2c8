"""Domain models for time-boxed activities."""

from __future__ import annotations

from .categories import DEFAULT_CATEGORIES, DEFAULT_CATEGORY_TABLE, CategoryTable, resolve_category
from .enums import CategoryId
from .models import Activity, Category, ReferenceInstant

__all__ = [
    "Activity",
    "Category",
    "CategoryId",
    "CategoryTable",
    "DEFAULT_CATEGORIES",
    "DEFAULT_CATEGORY_TABLE",
    "ReferenceInstant",
    "resolve_category",
]
