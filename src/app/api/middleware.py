"""Request logging middleware."""
import time
import uuid
from typing import Callable

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from src.app.logging import get_logger

logger = get_logger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Log one line per request and tag the response with a request ID.

    An incoming X-Request-ID header is reused; otherwise a UUID is generated.
    """

    REQUEST_ID_HEADER = "X-Request-ID"

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(self.REQUEST_ID_HEADER) or str(uuid.uuid4())
        start_time = time.monotonic()

        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (time.monotonic() - start_time) * 1000
            logger.error(
                "%s %s failed after %.2fms [%s]",
                request.method, request.url.path, duration_ms, request_id,
            )
            raise

        duration_ms = (time.monotonic() - start_time) * 1000
        response.headers[self.REQUEST_ID_HEADER] = request_id
        logger.info(
            "%s %s -> %d in %.2fms [%s]",
            request.method, request.url.path, response.status_code, duration_ms, request_id,
        )
        return response
