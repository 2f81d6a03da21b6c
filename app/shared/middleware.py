"""
Request pipeline middleware.

- RecoveryMiddleware turns any exception that escaped the routers into the
  standard failure envelope, so exactly one response is written.
- AccessLogMiddleware records one line per request once the response is
  known: method, path, client address, latency, status and request id.

Both run inside RequestIdMiddleware, so the request id is already bound.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.shared.errors.handlers import error_response
from app.shared.request_context import get_request_id

access_logger = logging.getLogger("app.access")


def access_log_level(status_code: int) -> int:
    """Pick the log level for a finished request from its status code."""
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class RecoveryMiddleware(BaseHTTPMiddleware):
    """Catch-all for unexpected errors. Never exposes internals."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return error_response(exc)


class AccessLogMiddleware(BaseHTTPMiddleware):
    """Logs every request after the handler chain has completed."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        latency_ms = (time.perf_counter() - start) * 1000

        path = request.url.path
        if request.url.query:
            path = f"{path}?{request.url.query}"
        client_ip = request.client.host if request.client else "-"

        access_logger.log(
            access_log_level(response.status_code),
            "%s %s status=%d ip=%s latency=%.2fms requestId=%s",
            request.method,
            path,
            response.status_code,
            client_ip,
            latency_ms,
            get_request_id(),
        )
        return response
