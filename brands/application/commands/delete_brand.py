"""
DeleteBrandCommand.
"""

import uuid
from dataclasses import dataclass


@dataclass
class DeleteBrandCommand:
    """Command to delete a brand that has no products."""

    brand_id: uuid.UUID
