"""
Storefront product browsing.
"""

from decimal import Decimal
from typing import Any, Dict, Optional

from core.domain.exceptions import InvalidInputError
from core.domain.listing import Page, paginate, search
from products.application.handlers.product_handlers import ListProductsHandler
from products.application.queries.browse_products import (
    SORT_DISCOUNT,
    SORT_NAME,
    SORT_NEWEST,
    SORT_OPTIONS,
    SORT_PRICE_HIGH,
    SORT_PRICE_LOW,
    BrowseProductsQuery,
)
from products.ports.product_repository import ProductRepository

STOREFRONT_SEARCH_FIELDS = ("name", "description", "brand.name")

# (key, reverse) per sort option
_SORTS: Dict[str, tuple] = {
    SORT_NEWEST: (lambda row: row.created_at, True),
    SORT_PRICE_LOW: (lambda row: Decimal(row.price), False),
    SORT_PRICE_HIGH: (lambda row: Decimal(row.price), True),
    SORT_NAME: (lambda row: row.name.casefold(), False),
    SORT_DISCOUNT: (lambda row: row.discount_percentage, True),
}


def _matches(ref: Any, wanted: Optional[str]) -> bool:
    if not wanted:
        return True
    if ref is None:
        return False
    return wanted in (str(ref.id), ref.slug)


class BrowseProductsHandler:
    """Handler for BrowseProductsQuery."""

    def __init__(self, product_repository: ProductRepository):
        """Initialize handler with repository."""
        self.product_repository = product_repository

    async def handle(self, query: BrowseProductsQuery) -> Page:
        """
        Filter, sort and paginate the product grid.

        Args:
            query: BrowseProductsQuery

        Returns:
            Page of ProductDTO

        Raises:
            InvalidInputError: If the sort option or price range is invalid
        """
        if query.sort not in SORT_OPTIONS:
            raise InvalidInputError(f"Sort must be one of: {', '.join(SORT_OPTIONS)}")
        if query.min_price > query.max_price:
            raise InvalidInputError("Minimum price cannot exceed maximum price")

        rows = await ListProductsHandler(self.product_repository).all()
        rows = search(rows, query.search, STOREFRONT_SEARCH_FIELDS)
        rows = [
            row
            for row in rows
            if _matches(row.category, query.category)
            and _matches(row.brand, query.brand)
            and query.min_price <= Decimal(row.price) <= query.max_price
        ]

        key, reverse = _SORTS[query.sort]
        ordered = sorted(rows, key=key, reverse=reverse)
        try:
            return paginate(ordered, query.page, query.page_size)
        except ValueError as e:
            raise InvalidInputError(str(e)) from e
