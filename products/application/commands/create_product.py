"""
CreateProductCommand.
"""

from dataclasses import dataclass

from products.domain.product import ProductDetails


@dataclass
class CreateProductCommand:
    """Command to create a product; the slug is derived from the name."""

    details: ProductDetails
