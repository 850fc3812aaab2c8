from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Optional, Tuple

from .enums import CategoryId
from .models import Category

DEFAULT_CATEGORIES: Tuple[Category, ...] = (
    Category(CategoryId.WORK.value, "Work", "sky-500", "from-sky-500 to-sky-600"),
    Category(CategoryId.PERSONAL.value, "Personal", "blue-500", "from-blue-500 to-blue-600"),
    Category(CategoryId.HEALTH.value, "Health", "indigo-500", "from-indigo-500 to-indigo-600"),
    Category(CategoryId.STUDY.value, "Study", "cyan-500", "from-cyan-500 to-cyan-600"),
    Category(CategoryId.MEETINGS.value, "Meetings", "slate-500", "from-slate-500 to-slate-600"),
    Category(CategoryId.URGENT.value, "Urgent", "blue-600", "from-blue-600 to-blue-700"),
    Category(CategoryId.OTHER.value, "Other", "gray-500", "from-gray-500 to-gray-600"),
)


@dataclass(frozen=True)
class CategoryTable:
    """Static category lookup whose ``resolve`` never fails."""

    entries: Tuple[Category, ...] = DEFAULT_CATEGORIES
    default_id: str = CategoryId.WORK.value

    def __post_init__(self) -> None:
        if not self.entries:
            raise ValueError("A category table needs at least one entry.")
        if self.default_id not in self._by_id():
            raise ValueError(f"Default category '{self.default_id}' is not in the table.")

    def _by_id(self) -> Dict[str, Category]:
        return {category.id: category for category in self.entries}

    @property
    def default(self) -> Category:
        return self._by_id()[self.default_id]

    def resolve(self, category_id: Optional[str]) -> Category:
        if category_id is None:
            return self.default
        return self._by_id().get(category_id, self.default)

    def ids(self) -> Iterable[str]:
        return (category.id for category in self.entries)

    def __contains__(self, category_id: object) -> bool:
        return category_id in self._by_id()

    def __iter__(self):
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


DEFAULT_CATEGORY_TABLE = CategoryTable()


def resolve_category(category_id: Optional[str], table: CategoryTable = DEFAULT_CATEGORY_TABLE) -> Category:
    return table.resolve(category_id)
