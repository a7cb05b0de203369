"""
ListCategoriesQuery.
"""

from dataclasses import dataclass, field

from core.domain.listing import ListingQuery


@dataclass
class ListCategoriesQuery:
    """Query for the dashboard category table."""

    listing: ListingQuery = field(default_factory=ListingQuery)
