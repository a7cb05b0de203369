"""
Dashboard access middleware.

Dashboard and upload endpoints are for administrators only. The
session user is resolved by Django's AuthenticationMiddleware, which
must run before this one.
"""

import logging
from typing import Optional

from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.deprecation import MiddlewareMixin

from core.domain.exceptions import (
    AdminAccessRequiredError,
    AuthenticationRequiredError,
    DomainException,
)
from core.domain.value_objects import UserRole

logger = logging.getLogger(__name__)

PROTECTED_PREFIXES = (
    "/api/v1/dashboard/",
    "/api/v1/uploads/",
)


def error_body(exc: DomainException) -> dict:
    """Uniform error payload for responses built outside DRF."""
    return {"success": False, "data": None, "error": exc.message, "code": exc.code}


class DashboardAccessMiddleware(MiddlewareMixin):
    """
    Middleware guarding admin-only endpoints.

    This middleware:
    1. Returns 401 when no user is signed in
    2. Returns 403 when the user is not an administrator
    """

    def process_request(self, request: HttpRequest) -> Optional[HttpResponse]:
        """
        Process request and check dashboard access.

        Args:
            request: HTTP request

        Returns:
            JsonResponse with 401/403 if access is denied, None otherwise
        """
        if not request.path.startswith(PROTECTED_PREFIXES):
            return None

        user = getattr(request, "user", None)
        if user is None or not user.is_authenticated:
            return JsonResponse(error_body(AuthenticationRequiredError()), status=401)

        if getattr(user, "role", None) != UserRole.ADMIN.value:
            logger.warning(
                "Dashboard access denied",
                extra={"user_id": str(user.pk), "path": request.path},
            )
            return JsonResponse(error_body(AdminAccessRequiredError()), status=403)

        return None
