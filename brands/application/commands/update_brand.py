"""
UpdateBrandCommand.
"""

import uuid
from dataclasses import dataclass
from typing import Optional


@dataclass
class UpdateBrandCommand:
    """Command to edit a brand, including its slug."""

    brand_id: uuid.UUID
    name: str
    slug: str
    description: Optional[str] = None
    logo: Optional[str] = None
    website: Optional[str] = None
