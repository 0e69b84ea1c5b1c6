"""Request logging middleware."""

import logging
import time

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """
    Log every HTTP request with its outcome.

    Successful and redirected responses are logged at INFO,
    client and server errors at WARNING.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        started = time.monotonic()
        response = self.get_response(request)
        duration_ms = (time.monotonic() - started) * 1000

        level = logging.INFO if response.status_code < 400 else logging.WARNING
        logger.log(
            level,
            'HTTP %s %s from %s -> %s (%.1f ms)',
            request.method,
            request.path,
            self._client_ip(request),
            response.status_code,
            duration_ms,
        )
        return response

    @staticmethod
    def _client_ip(request):
        forwarded = request.META.get('HTTP_X_FORWARDED_FOR')
        if forwarded:
            return forwarded.split(',')[0].strip()
        return request.META.get('REMOTE_ADDR', 'unknown')
