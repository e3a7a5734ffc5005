"""API security middleware."""

import logging
import secrets
import time
from collections import defaultdict, deque

from fastapi import Request
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger("clarify.api.middleware")

# Paths that don't require authentication
PUBLIC_PATHS = {
    "/",
    "/health",
    "/api/docs",
    "/api/redoc",
    "/openapi.json",
}

# AI calls are expensive; they get a quarter of the normal budget
_STRICT_PREFIXES = ("/api/v1/ai/",)
_WINDOW_SECONDS = 60


class APIKeyMiddleware(BaseHTTPMiddleware):
    """Require an API key for all non-public endpoints.

    Enabled when ``api_key`` is non-empty. Clients pass the key via
    ``Authorization: Bearer <key>`` or ``X-API-Key: <key>``.
    """

    def __init__(self, app, api_key: str = "") -> None:
        super().__init__(app)
        self._api_key = api_key

    async def dispatch(self, request: Request, call_next):
        # If no key configured, allow all (local dev)
        if not self._api_key:
            return await call_next(request)

        path = request.url.path.rstrip("/")
        if path in PUBLIC_PATHS or path == "" or request.method == "OPTIONS":
            return await call_next(request)

        auth_header = request.headers.get("authorization", "")
        api_key_header = request.headers.get("x-api-key", "")

        provided_key = ""
        if auth_header.startswith("Bearer "):
            provided_key = auth_header[7:]
        elif api_key_header:
            provided_key = api_key_header

        if not provided_key or not secrets.compare_digest(provided_key, self._api_key):
            logger.warning(
                "Unauthorized request to %s from %s",
                request.url.path,
                request.client.host if request.client else "unknown",
            )
            return JSONResponse(
                status_code=401,
                content={"detail": "Invalid or missing API key"},
            )

        return await call_next(request)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """In-memory sliding window rate limiter by client IP."""

    def __init__(self, app, limit_per_minute: int = 120) -> None:
        super().__init__(app)
        self._default_limit = limit_per_minute
        self._strict_limit = max(1, limit_per_minute // 4)
        self._windows: dict[str, deque] = defaultdict(deque)

    def _get_client_ip(self, request: Request) -> str:
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()
        return request.client.host if request.client else "unknown"

    def _limit_for(self, path: str) -> int:
        if any(path.startswith(p) for p in _STRICT_PREFIXES):
            return self._strict_limit
        return self._default_limit

    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        if path in PUBLIC_PATHS or path == "":
            return await call_next(request)

        client_ip = self._get_client_ip(request)
        limit = self._limit_for(path)
        now = time.monotonic()

        window = self._windows[client_ip]
        cutoff = now - _WINDOW_SECONDS
        while window and window[0] < cutoff:
            window.popleft()

        if len(window) >= limit:
            retry_after = int(window[0] - cutoff) + 1
            logger.warning(
                "Rate limit exceeded for %s on %s (%d/%d)",
                client_ip, path, len(window), limit,
            )
            return JSONResponse(
                status_code=429,
                content={"detail": "Too many requests"},
                headers={"Retry-After": str(retry_after)},
            )

        window.append(now)
        return await call_next(request)
