"""
Django session adapter.
"""

import uuid

from asgiref.sync import sync_to_async
from django.contrib.auth import login, logout

from accounts.infrastructure.models import User as UserModel
from accounts.ports.session import SessionPort


class DjangoSession(SessionPort):
    """SessionPort backed by django.contrib.auth and the session middleware."""

    def __init__(self, request):
        """
        Args:
            request: The current Django (or DRF) request
        """
        self.request = request

    @sync_to_async
    def start(self, user_id: uuid.UUID) -> None:
        """Sign the user in, rotating the session key."""
        user = UserModel.objects.get(id=user_id)  # pylint: disable=no-member
        login(self.request, user, backend="django.contrib.auth.backends.ModelBackend")

    @sync_to_async
    def end(self) -> None:
        """Flush the session."""
        logout(self.request)
