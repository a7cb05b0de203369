"""
DeleteProductCommand.
"""

import uuid
from dataclasses import dataclass


@dataclass
class DeleteProductCommand:
    """Command to delete a product that was never ordered."""

    product_id: uuid.UUID
