from __future__ import annotations

from typing import TYPE_CHECKING

from starlette.middleware.base import BaseHTTPMiddleware

from app.config import settings
from app.utils.logging import get_logger

if TYPE_CHECKING:
    from fastapi import Request
    from starlette.types import ASGIApp

logger = get_logger(__name__)


class SecurityMiddleware(BaseHTTPMiddleware):
    """Add security headers and log GraphQL traffic."""

    def __init__(self, app: ASGIApp):
        super().__init__(app)

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        is_graphql = request.url.path.startswith(settings.graphql_path)

        # GraphiQL loads its bundle and styles from a CDN
        if is_graphql and settings.graphiql:
            csp_policy = (
                "default-src 'self'; "
                "script-src 'self' 'unsafe-inline' https://unpkg.com; "
                "style-src 'self' 'unsafe-inline' https://unpkg.com; "
                "img-src 'self' data: https:; "
                "connect-src 'self'; "
                "frame-ancestors 'none';"
            )
        else:
            csp_policy = "default-src 'self'; frame-ancestors 'none';"
        response.headers["Content-Security-Policy"] = csp_policy

        if request.url.scheme == "https":
            response.headers["Strict-Transport-Security"] = "max-age=15552000; includeSubDomains"

        response.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, max-age=0"
        response.headers["Pragma"] = "no-cache"

        if is_graphql and request.method == "POST":
            client_ip = request.client.host if request.client else "unknown"
            logger.debug(
                "GraphQL request served",
                extra={
                    "path": request.url.path,
                    "status": response.status_code,
                    "ip": client_ip,
                },
            )

        return response
