"""API key authentication middleware.

Checks the Authorization: ApiKey header on all /api/* paths except the
public ones below.
"""

from __future__ import annotations

import logging

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from app.services.auth import API_KEY_SCHEME, get_api_key
from app.services.key_store import get_known_keys, key_fingerprint, verify_api_key

logger = logging.getLogger(__name__)

# Paths that don't require authentication
_PUBLIC_PATHS = {"/api/health", "/api/auth/verify"}


def _unauthorized() -> JSONResponse:
    return JSONResponse(
        status_code=401,
        content={"detail": "Invalid or missing API key"},
        headers={"WWW-Authenticate": API_KEY_SCHEME},
    )


class ApiKeyAuthMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path

        # Only protect /api/* paths
        if not path.startswith("/api/"):
            return await call_next(request)

        if path in _PUBLIC_PATHS:
            return await call_next(request)

        # Skip auth if disabled
        if get_known_keys() is None:
            return await call_next(request)

        api_key = get_api_key(request.headers)
        if api_key is None:
            logger.warning("Rejected %s %s: no ApiKey credentials", request.method, path)
            return _unauthorized()

        if not verify_api_key(api_key):
            logger.warning(
                "Rejected %s %s: unknown key %s",
                request.method,
                path,
                key_fingerprint(api_key),
            )
            return _unauthorized()

        return await call_next(request)
