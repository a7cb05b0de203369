"""
CreateCategoryCommand.
"""

from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class CreateCategoryCommand:
    """
    Command to create a category.

    ``parent_id`` is taken as sent by the form: a UUID, "", "none" or None.
    """

    name: str
    description: Optional[str] = None
    image: Optional[str] = None
    parent_id: Any = None
