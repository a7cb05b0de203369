"""
CreateBrandCommand.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class CreateBrandCommand:
    """Command to create a brand; the slug is derived from the name."""

    name: str
    description: Optional[str] = None
    logo: Optional[str] = None
    website: Optional[str] = None
