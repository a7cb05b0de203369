"""
ListBrandsQuery.
"""

from dataclasses import dataclass, field

from core.domain.listing import ListingQuery


@dataclass
class ListBrandsQuery:
    """Query for the dashboard brand table."""

    listing: ListingQuery = field(default_factory=ListingQuery)
