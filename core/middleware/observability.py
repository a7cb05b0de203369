"""
Request logging middleware.

Tags every request with a correlation id and writes one structured log
line when it finishes. Health probes are logged at DEBUG so they do not
drown the access log.
"""

import logging
import time
import uuid
from typing import Callable, Dict, Optional

from django.http import HttpRequest, HttpResponse
from opentelemetry import trace
from opentelemetry.trace import format_trace_id

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "X-Correlation-ID"
QUIET_PREFIXES = ("/health/", "/ready/")


def current_trace_id() -> Optional[str]:
    """Hex trace id of the active span, if there is one."""
    context = trace.get_current_span().get_span_context()
    return format_trace_id(context.trace_id) if context.is_valid else None


def outcome_of(status_code: int) -> str:
    """Bucket a status code for logs and the X-Request-Status header."""
    if status_code >= 500:
        return "server_error"
    if status_code >= 400:
        return "client_error"
    return "success"


class ObservabilityMiddleware:
    """Correlation ids, access logging and timing headers."""

    def __init__(self, get_response: Callable):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request.correlation_id = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex
        trace_id = current_trace_id()
        if trace_id:
            request.trace_id = trace_id

        started = time.monotonic()
        try:
            response = self.get_response(request)
        except Exception as e:
            logger.error(
                "Request failed",
                extra={**self._context(request, trace_id), "error_type": type(e).__name__},
                exc_info=True,
            )
            raise

        elapsed = time.monotonic() - started
        outcome = outcome_of(response.status_code)
        self._log(request, response, outcome, elapsed, trace_id)

        response[CORRELATION_HEADER] = request.correlation_id
        response["X-Request-Status"] = outcome
        response["X-Request-Duration"] = f"{elapsed:.3f}"
        if trace_id:
            response["X-Trace-ID"] = trace_id
        return response

    @staticmethod
    def _context(request: HttpRequest, trace_id: Optional[str]) -> Dict[str, object]:
        context = {
            "correlation_id": request.correlation_id,
            "method": request.method,
            "path": request.path,
            "remote_addr": request.META.get("REMOTE_ADDR"),
        }
        if trace_id:
            context["trace_id"] = trace_id
        user = getattr(request, "user", None)
        if user is not None and user.is_authenticated:
            context["user_id"] = str(user.pk)
            context["user_role"] = getattr(user, "role", None)
        return context

    def _log(self, request, response, outcome, elapsed, trace_id):
        extra = {
            **self._context(request, trace_id),
            "status_code": response.status_code,
            "request_status": outcome,
            "duration_ms": round(elapsed * 1000, 2),
        }
        if outcome == "server_error":
            logger.error("Request completed with server error", extra=extra)
        elif outcome == "client_error":
            logger.warning("Request completed with client error", extra=extra)
        elif request.path.startswith(QUIET_PREFIXES):
            logger.debug("Probe served", extra=extra)
        else:
            logger.info("Request completed", extra=extra)
