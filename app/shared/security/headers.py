"""
Secure HTTP headers middleware.

Adds security-related headers to every response. Balance, investment
and order payloads are per-user, so API responses are also marked
non-cacheable.

No business logic. Pure cross-cutting concern.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Content-Security-Policy": "default-src 'self'",
}

API_PREFIX = "/api/"
NO_STORE = "no-store"


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that adds secure HTTP headers to every response.

    Args:
        app: The wrapped ASGI application.
        cache_api_responses: Leave ``Cache-Control`` untouched on API routes.
    """

    def __init__(self, app: ASGIApp, cache_api_responses: bool = False) -> None:
        super().__init__(app)
        self._cache_api_responses = cache_api_responses

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        response = await call_next(request)
        for header_name, header_value in SECURE_HEADERS.items():
            response.headers[header_name] = header_value
        if not self._cache_api_responses and request.url.path.startswith(API_PREFIX):
            response.headers["Cache-Control"] = NO_STORE
        return response
