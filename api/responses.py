"""
Success envelopes for API responses.
"""
from typing import Any, Optional

from rest_framework import status
from rest_framework.response import Response

from api.exceptions import error_payload, first_error_message
from core.domain.listing import Page


def success(
    data: Any = None, message: Optional[str] = None, status_code: int = status.HTTP_200_OK
) -> Response:
    """``{"success": true, "data": ..., "error": null, "message": ...}``"""
    return Response(
        {"success": True, "data": data, "error": None, "message": message},
        status=status_code,
    )


def paginated(page: Page, data: Any, message: Optional[str] = None) -> Response:
    """
    Success envelope for a listing page.

    Args:
        page: Page the rows come from
        data: Serialized rows of the page
        message: Optional message
    """
    return Response(
        {
            "success": True,
            "data": data,
            "error": None,
            "message": message,
            "pagination": page.pagination(),
        },
        status=status.HTTP_200_OK,
    )


def validation_error(errors: Any) -> Response:
    """Error envelope for rejected request bodies and query strings."""
    return Response(
        error_payload(first_error_message(errors), "VALIDATION_ERROR", errors),
        status=status.HTTP_400_BAD_REQUEST,
    )
