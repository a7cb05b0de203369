"""
Model registry for the brands app.
"""
from brands.infrastructure.models import Brand  # noqa: F401
