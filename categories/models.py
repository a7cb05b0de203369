"""
Model registry for the categories app.
"""
from categories.infrastructure.models import ProductCategory  # noqa: F401
