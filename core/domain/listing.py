"""
Listing utilities for dashboard tables.

Search, date-range filtering and pagination over an in-memory list of
rows. Rows may be dicts or objects; fields are addressed with dotted
paths such as ``"brand.name"``.
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Iterable, List, Optional, Sequence, Union

DEFAULT_PAGE_SIZE = 5
PAGE_SIZE_OPTIONS = (5, 10, 25, 50, 100)
ELLIPSIS = "ellipsis"

PageNumber = Union[int, str]


def resolve_field(item: Any, path: str) -> Any:
    """
    Read a possibly nested field from a row.

    Args:
        item: Dict or object
        path: Dotted field path

    Returns:
        The value, or None if any segment is missing
    """
    value = item
    for part in path.split("."):
        if value is None:
            return None
        if isinstance(value, dict):
            value = value.get(part)
        else:
            value = getattr(value, part, None)
    return value


def search(items: Iterable[Any], query: Optional[str], fields: Sequence[str]) -> List[Any]:
    """
    Keep rows where any field contains the query, ignoring case.

    A blank query keeps every row. Missing or null fields never match.

    Args:
        items: Rows to filter
        query: Search text
        fields: Dotted paths of the searchable fields

    Returns:
        Matching rows in their original order
    """
    items = list(items)
    if not query or not query.strip():
        return items

    needle = query.strip().lower()
    matched = []
    for item in items:
        for path in fields:
            value = resolve_field(item, path)
            if value is not None and needle in str(value).lower():
                matched.append(item)
                break
    return matched


def _as_date(value: Any) -> Optional[date]:
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.fromisoformat(str(value)).date()
    except ValueError:
        return None


def filter_by_date(
    items: Iterable[Any],
    date_field: str,
    date_from: Optional[date],
    date_to: Optional[date],
) -> List[Any]:
    """
    Keep rows whose date falls within an inclusive day range.

    The filter only applies when both ends are given; ``date_to`` covers
    the whole day. Rows without a readable date are dropped while the
    filter is active.

    Args:
        items: Rows to filter
        date_field: Dotted path of the date field
        date_from: First day of the range
        date_to: Last day of the range

    Returns:
        Rows inside the range
    """
    items = list(items)
    if date_from is None or date_to is None:
        return items

    kept = []
    for item in items:
        day = _as_date(resolve_field(item, date_field))
        if day is not None and date_from <= day <= date_to:
            kept.append(item)
    return kept


def page_numbers(current_page: int, total_pages: int) -> List[PageNumber]:
    """
    Build the page-number strip shown under a table.

    Args:
        current_page: 1-based current page
        total_pages: Number of pages

    Returns:
        Page numbers with ``"ellipsis"`` markers for skipped ranges
    """
    if total_pages <= 5:
        return list(range(1, total_pages + 1))
    if current_page <= 3:
        return [1, 2, 3, 4, ELLIPSIS, total_pages]
    if current_page >= total_pages - 2:
        return [1, ELLIPSIS] + list(range(total_pages - 3, total_pages + 1))
    return [
        1,
        ELLIPSIS,
        current_page - 1,
        current_page,
        current_page + 1,
        ELLIPSIS,
        total_pages,
    ]


@dataclass
class Page:
    """One page of a filtered listing."""

    items: List[Any]
    page: int
    page_size: int
    total_items: int
    total_pages: int
    page_numbers: List[PageNumber] = field(default_factory=list)

    @property
    def has_next(self) -> bool:
        """Whether a later page exists."""
        return self.page < self.total_pages

    @property
    def has_previous(self) -> bool:
        """Whether an earlier page exists."""
        return self.page > 1

    def pagination(self) -> dict:
        """Pagination block for API responses."""
        return {
            "page": self.page,
            "page_size": self.page_size,
            "total_items": self.total_items,
            "total_pages": self.total_pages,
            "has_next": self.has_next,
            "has_previous": self.has_previous,
            "page_numbers": self.page_numbers,
        }


def paginate(items: Sequence[Any], page: int = 1, page_size: int = DEFAULT_PAGE_SIZE) -> Page:
    """
    Slice a list into a page.

    Pages past the end are clamped to the last page.

    Args:
        items: Rows to paginate
        page: 1-based page number
        page_size: Rows per page, one of PAGE_SIZE_OPTIONS

    Returns:
        Page with its rows and pagination metadata

    Raises:
        ValueError: If page_size is not an allowed option
    """
    if page_size not in PAGE_SIZE_OPTIONS:
        raise ValueError(f"Page size must be one of {PAGE_SIZE_OPTIONS}")

    items = list(items)
    total_items = len(items)
    total_pages = math.ceil(total_items / page_size)
    current = min(max(page, 1), max(total_pages, 1))
    start = (current - 1) * page_size

    return Page(
        items=items[start : start + page_size],
        page=current,
        page_size=page_size,
        total_items=total_items,
        total_pages=total_pages,
        page_numbers=page_numbers(current, total_pages),
    )


@dataclass
class ListingQuery:
    """Table state sent by the dashboard."""

    search: Optional[str] = None
    date_from: Optional[date] = None
    date_to: Optional[date] = None
    page: int = 1
    page_size: int = DEFAULT_PAGE_SIZE


def apply_listing(
    items: Iterable[Any],
    query: ListingQuery,
    search_fields: Sequence[str],
    date_field: str = "created_at",
) -> Page:
    """
    Run search, date filter and pagination in table order.

    Args:
        items: All rows
        query: Table state
        search_fields: Dotted paths searched by the query text
        date_field: Dotted path used by the date filter

    Returns:
        The requested page
    """
    rows = search(items, query.search, search_fields)
    rows = filter_by_date(rows, date_field, query.date_from, query.date_to)
    return paginate(rows, query.page, query.page_size)
