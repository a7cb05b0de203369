"""
Model registry for the products app.
"""
from products.infrastructure.models import CartItem, OrderItem, Product  # noqa: F401
