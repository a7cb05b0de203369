"""
ListProductsQuery.
"""

from dataclasses import dataclass, field

from core.domain.listing import ListingQuery


@dataclass
class ListProductsQuery:
    """Query for the dashboard product table."""

    listing: ListingQuery = field(default_factory=ListingQuery)
