"""
UpdateCategoryCommand.
"""

import uuid
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class UpdateCategoryCommand:
    """Command to edit a category, including its slug and parent."""

    category_id: uuid.UUID
    name: str
    slug: str
    description: Optional[str] = None
    image: Optional[str] = None
    parent_id: Any = None
