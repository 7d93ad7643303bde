"""
Request logging middleware.

Tags every request with a correlation id (taken from the caller's
X-Correlation-ID header when present) and writes one access line per request:

    GET /parcel/g/665f... -> 200 in 3.41ms from 127.0.0.1 [cid=9b1c...]
"""

import logging
import time
import uuid

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("parcelly.request")

CORRELATION_HEADER = "X-Correlation-ID"


def client_ip(request: Request) -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def level_for_status(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class ObservabilityMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        correlation_id = request.headers.get(CORRELATION_HEADER) or uuid.uuid4().hex
        request.state.correlation_id = correlation_id

        started = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - started) * 1000

        response.headers[CORRELATION_HEADER] = correlation_id
        response.headers["X-Process-Time"] = f"{duration_ms:.2f}"

        logger.log(
            level_for_status(response.status_code),
            "%s %s -> %s in %.2fms from %s [cid=%s]",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
            client_ip(request),
            correlation_id,
        )
        return response
