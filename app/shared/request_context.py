"""
Request-scoped correlation identifiers.

Each inbound request gets one request id: the caller's ``X-Request-Id``
header when present, a fresh UUID otherwise. The id is held in a typed
context variable for the lifetime of the request, so loggers and response
builders can read it without touching the request object, and it is echoed
back on the response header.
"""

import uuid
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-Id"


@dataclass(frozen=True)
class RequestContext:
    """Per-request values shared by every layer of the pipeline."""

    request_id: str


_request_ctx: ContextVar[RequestContext | None] = ContextVar(
    "request_context", default=None
)


def ensure_request_id(incoming: str | None) -> str:
    """Return the caller supplied id verbatim, or generate a new one.

    Args:
        incoming: Raw value of the request id header, if any.

    Returns:
        A non-empty request id.
    """
    if incoming:
        return incoming
    return str(uuid.uuid4())


def get_request_context() -> RequestContext | None:
    """Return the context of the request being handled, if any."""
    return _request_ctx.get()


def get_request_id() -> str:
    """Return the active request id, or an empty string outside a request."""
    ctx = _request_ctx.get()
    return ctx.request_id if ctx is not None else ""


@contextmanager
def request_scope(request_id: str) -> Iterator[RequestContext]:
    """Bind ``request_id`` as the active request context for the block."""
    ctx = RequestContext(request_id=request_id)
    token = _request_ctx.set(ctx)
    try:
        yield ctx
    finally:
        _request_ctx.reset(token)


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Assigns a request id to each request and exposes it via headers."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = ensure_request_id(request.headers.get(REQUEST_ID_HEADER))
        request.state.request_id = request_id
        with request_scope(request_id):
            response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
