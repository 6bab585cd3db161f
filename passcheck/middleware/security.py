import time
import uuid
import logging
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

logger = logging.getLogger(__name__)

# Responses under these paths carry a password-derived digest.
SENSITIVE_PATH_PREFIXES = ("/analyze",)

NO_STORE_HEADERS = {
    "Cache-Control": "no-store",
    "Pragma": "no-cache",
    "X-Content-Type-Options": "nosniff",
}


def is_sensitive_path(path: str) -> bool:
    return any(path == prefix or path.startswith(prefix + "/") for prefix in SENSITIVE_PATH_PREFIXES)


class SecurityLoggingMiddleware(BaseHTTPMiddleware):
    """
    Request logging and response hardening for password analysis.

    - Never touches request.body() or the query string; only method and path
      are logged, so nothing typed by the user reaches the logs
    - Analysis responses get no-store headers: the digest must not be cached
      by browsers or proxies
    - Adds X-Request-ID for support/debug
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = str(uuid.uuid4())
        start_time = time.time()
        path = request.url.path
        sensitive = is_sensitive_path(path)

        request.state.request_id = request_id

        try:
            response = await call_next(request)
        except Exception:
            logger.exception(
                "request_failed",
                extra={
                    "request_id": request_id,
                    "path": path,
                    "method": request.method,
                    "sensitive": sensitive,
                },
            )
            raise

        if sensitive:
            response.headers.update(NO_STORE_HEADERS)
        response.headers["X-Request-ID"] = request_id

        logger.info(
            "request_completed",
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": path,
                "status_code": response.status_code,
                "duration_ms": int((time.time() - start_time) * 1000),
                "sensitive": sensitive,
            },
        )
        return response
