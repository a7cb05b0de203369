"""
UpdateProductCommand.
"""

import uuid
from dataclasses import dataclass

from products.domain.product import ProductDetails


@dataclass
class UpdateProductCommand:
    """Command to edit a product. The slug follows the new name."""

    product_id: uuid.UUID
    details: ProductDetails
