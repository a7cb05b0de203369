"""
API exception handlers.

This module maps domain and framework exceptions to the uniform error
envelope ``{"success": false, "data": null, "error": ..., "code": ...}``.
"""

import logging
from typing import Any, Dict, Optional

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from core.domain.exceptions import (
    AdminAccessRequiredError,
    AuthenticationRequiredError,
    ConflictError,
    DomainException,
    FileValidationError,
    InvalidCredentialsError,
    InvalidInputError,
    InvalidPasswordError,
    InvalidReferenceError,
    NotFoundError,
    UserAlreadyExistsError,
)
from core.metrics import errors_total

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "An internal error occurred"

# Checked in order; the first matching family wins
DOMAIN_STATUS = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    ((InvalidReferenceError, InvalidInputError, FileValidationError), status.HTTP_400_BAD_REQUEST),
    ((UserAlreadyExistsError, InvalidPasswordError), status.HTTP_422_UNPROCESSABLE_ENTITY),
    ((InvalidCredentialsError, AuthenticationRequiredError), status.HTTP_401_UNAUTHORIZED),
    (AdminAccessRequiredError, status.HTTP_403_FORBIDDEN),
)


def error_payload(message: str, code: str, details: Any = None) -> Dict[str, Any]:
    """Build the error envelope."""
    payload = {"success": False, "data": None, "error": message, "code": code}
    if details is not None:
        payload["details"] = details
    return payload


def status_for(exc: DomainException) -> int:
    """HTTP status for a domain exception; storage and persistence failures are 500."""
    for families, status_code in DOMAIN_STATUS:
        if isinstance(exc, families):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def first_error_message(errors: Any) -> str:
    """
    Pick a readable message out of DRF validation errors.

    Args:
        errors: ``serializer.errors`` or a ValidationError detail

    Returns:
        ``"<field>: <message>"`` for field errors, the bare message otherwise
    """
    if isinstance(errors, dict):
        for field, value in errors.items():
            message = first_error_message(value)
            if field == "non_field_errors":
                return message
            return f"{field}: {message}"
    if isinstance(errors, (list, tuple)) and errors:
        return first_error_message(errors[0])
    return str(errors) if errors else "Invalid input"


def custom_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    """Custom exception handler for REST API."""
    trace_id = _get_trace_id(context)

    if isinstance(exc, DomainException):
        response = _handle_domain_exception(exc, context, trace_id)
    elif isinstance(exc, ValidationError):
        response = Response(
            error_payload(first_error_message(exc.detail), "VALIDATION_ERROR", exc.detail),
            status=status.HTTP_400_BAD_REQUEST,
        )
    elif isinstance(exc, APIException):
        response = exception_handler(exc, context)
        code = exc.default_code.upper().replace("-", "_")
        response.data = error_payload(str(exc.detail), code)
    elif isinstance(exc, Http404):
        response = Response(
            error_payload("Resource not found", "NOT_FOUND"),
            status=status.HTTP_404_NOT_FOUND,
        )
    else:
        response = _handle_unexpected_exception(exc, context, trace_id)

    if trace_id:
        response["X-Trace-ID"] = trace_id
    return response


def _get_trace_id(context: Dict[str, Any]) -> Optional[str]:
    """Extract trace ID from request context."""
    request = context.get("request")
    if not request:
        return None
    return getattr(request, "trace_id", getattr(request, "correlation_id", None))


def _endpoint(context: Dict[str, Any]) -> str:
    view = context.get("view")
    return view.__class__.__name__ if view else "unknown"


def _handle_domain_exception(
    exc: DomainException, context: Dict[str, Any], trace_id: Optional[str]
) -> Response:
    """Handle domain-specific exceptions."""
    status_code = status_for(exc)
    if status_code >= 500:
        errors_total.labels(error_type=exc.code, endpoint=_endpoint(context)).inc()
        logger.error(
            "Domain failure: %s - %s", exc.code, exc.message, extra={"trace_id": trace_id}
        )
    else:
        logger.warning(
            "Domain exception: %s - %s", exc.code, exc.message, extra={"trace_id": trace_id}
        )
    return Response(error_payload(exc.message, exc.code), status=status_code)


def _handle_unexpected_exception(
    exc: Exception, context: Dict[str, Any], trace_id: Optional[str]
) -> Response:
    """Handle unexpected or untracked exceptions."""
    errors_total.labels(error_type=exc.__class__.__name__, endpoint=_endpoint(context)).inc()
    logger.error("Unexpected error: %s", exc, extra={"trace_id": trace_id}, exc_info=True)
    return Response(
        error_payload(INTERNAL_ERROR_MESSAGE, "INTERNAL_ERROR"),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
