"""
DeleteCategoryCommand.
"""

import uuid
from dataclasses import dataclass


@dataclass
class DeleteCategoryCommand:
    """Command to delete a category that has no products."""

    category_id: uuid.UUID
