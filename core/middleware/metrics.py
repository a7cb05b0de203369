"""
Prometheus HTTP metrics middleware.
"""

import re
import time
from typing import Callable

from django.http import HttpRequest, HttpResponse

from core.metrics import http_request_duration_seconds, http_requests_total

_ID_SEGMENT = re.compile(r"/(?:[0-9a-f]{8}(?:-[0-9a-f]{4}){3}-[0-9a-f]{12}|\d+)(?=/|$)")


def normalize_endpoint(path: str) -> str:
    """
    Collapse UUID and numeric segments of a raw path into ``{id}``.

    Used when the request never resolved to a route (404s, middleware
    short-circuits).
    """
    return _ID_SEGMENT.sub("/{id}", path.split("?")[0])


def endpoint_label(request: HttpRequest) -> str:
    """
    Label for a request: the matched URL pattern, so product slugs and
    ids do not explode the series count.
    """
    match = getattr(request, "resolver_match", None)
    if match is not None and match.route:
        return "/" + match.route
    return normalize_endpoint(request.path)


class MetricsMiddleware:
    """Counts requests and times them per method and route."""

    def __init__(self, get_response: Callable):
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        started = time.perf_counter()
        status_code = 500
        try:
            response = self.get_response(request)
            status_code = response.status_code
            return response
        finally:
            endpoint = endpoint_label(request)
            http_requests_total.labels(
                method=request.method, endpoint=endpoint, status_code=status_code
            ).inc()
            http_request_duration_seconds.labels(
                method=request.method, endpoint=endpoint
            ).observe(time.perf_counter() - started)
