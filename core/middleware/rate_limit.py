"""
Rate limiting middleware.

Throttles the login and registration endpoints per client IP with a
fixed window counter kept in the cache.
"""

import hashlib
import time
from typing import Callable, Tuple

from django.conf import settings
from django.core.cache import cache
from django.http import HttpRequest, HttpResponse, JsonResponse

from core.metrics import errors_total

RATE_LIMITED_PATHS = (
    "/api/v1/auth/login",
    "/api/v1/auth/register",
)


class RateLimitMiddleware:
    """
    Rate limiting middleware per client IP.

    The limit (requests per window) comes from ``settings.AUTH_RATE_LIMIT``.
    """

    RATE_LIMIT_WINDOW = 60  # seconds

    def __init__(self, get_response: Callable):
        """Initialize middleware."""
        self.get_response = get_response

    def _get_client_ip(self, request: HttpRequest) -> str:
        """
        Extract the client IP, honouring the first X-Forwarded-For hop.

        Args:
            request: HTTP request

        Returns:
            Client IP string
        """
        forwarded = request.META.get("HTTP_X_FORWARDED_FOR", "")
        if forwarded:
            return forwarded.split(",")[0].strip()
        return request.META.get("REMOTE_ADDR", "unknown")

    def _get_rate_limit_key(self, client_ip: str, window: int) -> str:
        """
        Generate cache key for rate limiting.

        Args:
            client_ip: Client IP
            window: Window number

        Returns:
            Cache key string
        """
        ip_hash = hashlib.sha256(client_ip.encode()).hexdigest()[:16]
        return f"rate_limit:auth:{ip_hash}:{window}"

    def _check_rate_limit(self, client_ip: str, limit: int) -> Tuple[bool, int, int]:
        """
        Count the request and check it against the limit.

        Args:
            client_ip: Client IP
            limit: Requests allowed per window

        Returns:
            Tuple of (is_allowed, remaining, reset_time)
        """
        window = int(time.time() / self.RATE_LIMIT_WINDOW)
        reset_time = (window + 1) * self.RATE_LIMIT_WINDOW
        key = self._get_rate_limit_key(client_ip, window)

        if cache.get(key, 0) >= limit:
            return False, 0, reset_time

        try:
            count = cache.incr(key, 1)
        except ValueError:
            cache.set(key, 1, timeout=self.RATE_LIMIT_WINDOW)
            count = 1

        return True, max(0, limit - count), reset_time

    def __call__(self, request: HttpRequest) -> HttpResponse:
        """
        Process request with rate limiting.

        Args:
            request: HTTP request

        Returns:
            HTTP response with rate limit headers
        """
        if request.method != "POST" or not request.path.startswith(RATE_LIMITED_PATHS):
            return self.get_response(request)

        limit = settings.AUTH_RATE_LIMIT
        is_allowed, remaining, reset_time = self._check_rate_limit(
            self._get_client_ip(request), limit
        )

        if not is_allowed:
            errors_total.labels(error_type="rate_limit_exceeded", endpoint=request.path).inc()
            response = JsonResponse(
                {
                    "success": False,
                    "data": None,
                    "error": "Too many attempts. Please try again later.",
                    "code": "RATE_LIMIT_EXCEEDED",
                },
                status=429,
            )
        else:
            response = self.get_response(request)

        response["X-RateLimit-Limit"] = str(limit)
        response["X-RateLimit-Remaining"] = str(remaining)
        response["X-RateLimit-Reset"] = str(reset_time)
        if not is_allowed:
            response["Retry-After"] = str(max(0, reset_time - int(time.time())))

        return response
