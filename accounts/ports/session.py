"""
Session port.

Starting and ending a signed-in session is owned by the web layer;
handlers only ask for it.
"""

import uuid
from abc import ABC, abstractmethod


class SessionPort(ABC):
    """Signed-in session of the current request."""

    @abstractmethod
    async def start(self, user_id: uuid.UUID) -> None:
        """Sign the user in for the rest of the session."""
        pass

    @abstractmethod
    async def end(self) -> None:
        """Sign the current user out."""
        pass
