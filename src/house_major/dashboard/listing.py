"""Search and pagination over an already-fetched collection.

Everything here is a pure function of its inputs except :class:`ListState`,
which only holds the query and page a screen is showing.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")

# A searchable field is a dotted key path ("client.name") or a callable.
SearchField = str | Callable[[Any], Any]


def field_value(item: Any, search_field: SearchField) -> Any:
    """Read one searchable value from a record; missing paths read as None."""
    if callable(search_field):
        return search_field(item)
    value = item
    for key in search_field.split("."):
        if isinstance(value, dict):
            value = value.get(key)
        else:
            value = getattr(value, key, None)
        if value is None:
            return None
    return value


def matches(item: Any, query: str, fields: Sequence[SearchField]) -> bool:
    """True if any field, lower-cased, contains the lower-cased query."""
    needle = query.strip().lower()
    if not needle:
        return True
    for search_field in fields:
        value = field_value(item, search_field)
        if value is not None and needle in str(value).lower():
            return True
    return False


def filter_items(items: Sequence[T], query: str, fields: Sequence[SearchField]) -> list[T]:
    """Return the matching items in their original order."""
    return [item for item in items if matches(item, query, fields)]


def total_pages(count: int, page_size: int) -> int:
    if page_size < 1:
        raise ValueError("page_size must be at least 1")
    return math.ceil(count / page_size)


def paginate(items: Sequence[T], page: int, page_size: int) -> list[T]:
    """Return the 1-based ``page`` of ``items``."""
    if page_size < 1:
        raise ValueError("page_size must be at least 1")
    start = (page - 1) * page_size
    if start < 0:
        return []
    return list(items[start : start + page_size])


def clamp_page(page: int, pages: int) -> int:
    """Pull ``page`` back into ``1..max(1, pages)``."""
    return max(1, min(page, max(1, pages)))


@dataclass(frozen=True)
class PageView(Generic[T]):
    items: list[T]
    total_pages: int
    page: int
    total_items: int

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def view(
    collection: Sequence[T],
    query: str,
    page: int,
    page_size: int,
    fields: Sequence[SearchField],
) -> PageView[T]:
    """Filter then paginate ``collection``."""
    filtered = filter_items(collection, query, fields)
    return PageView(
        items=paginate(filtered, page, page_size),
        total_pages=total_pages(len(filtered), page_size),
        page=page,
        total_items=len(filtered),
    )


@dataclass
class ListState:
    """The query and page one list screen is showing."""

    page_size: int
    fields: tuple[SearchField, ...]
    query: str = ""
    page: int = field(default=1)

    def set_query(self, query: str) -> None:
        self.query = query
        self.page = 1

    def set_page(self, page: int) -> None:
        self.page = max(1, page)

    def next_page(self, collection: Sequence[Any]) -> None:
        current = self.view(collection)
        if current.has_next:
            self.page += 1

    def previous_page(self) -> None:
        if self.page > 1:
            self.page -= 1

    def clamp(self, collection: Sequence[Any]) -> int:
        """Keep the page in range after the collection changed size."""
        filtered = filter_items(collection, self.query, self.fields)
        self.page = clamp_page(self.page, total_pages(len(filtered), self.page_size))
        return self.page

    def view(self, collection: Sequence[T]) -> PageView[T]:
        return view(collection, self.query, self.page, self.page_size, self.fields)
