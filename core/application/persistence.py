"""
Helpers shared by catalog command handlers.
"""
import logging
from contextlib import asynccontextmanager

from django.db import DatabaseError

from core.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def database_errors_as(message: str):
    """
    Re-raise database failures as a PersistenceError with a user-facing message.

    Domain exceptions pass through untouched.

    Args:
        message: Message shown to the user, e.g. "Failed to create brand"
    """
    try:
        yield
    except DatabaseError as e:
        logger.error("%s: %s", message, e, exc_info=True)
        raise PersistenceError(message) from e
