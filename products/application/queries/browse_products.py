"""
BrowseProductsQuery.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

SORT_NEWEST = "newest"
SORT_PRICE_LOW = "price-low"
SORT_PRICE_HIGH = "price-high"
SORT_NAME = "name"
SORT_DISCOUNT = "discount"
SORT_OPTIONS = (SORT_NEWEST, SORT_PRICE_LOW, SORT_PRICE_HIGH, SORT_NAME, SORT_DISCOUNT)

DEFAULT_MIN_PRICE = Decimal("0")
DEFAULT_MAX_PRICE = Decimal("50000")
STOREFRONT_PAGE_SIZE = 25


@dataclass
class BrowseProductsQuery:
    """
    Storefront product grid state.

    ``category`` and ``brand`` match either an id or a slug.
    """

    search: Optional[str] = None
    category: Optional[str] = None
    brand: Optional[str] = None
    min_price: Decimal = DEFAULT_MIN_PRICE
    max_price: Decimal = DEFAULT_MAX_PRICE
    sort: str = SORT_NEWEST
    page: int = 1
    page_size: int = STOREFRONT_PAGE_SIZE
