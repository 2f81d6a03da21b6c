"""
Uniform response envelope.

Every response body, success or failure, has the shape
``{"code", "message", "data", "requestId"}``. ``code`` is 200 exactly when
the operation succeeded, and ``data`` is null on every failure.
Paginated endpoints nest ``{"total", "page", "pageSize", "list"}`` in data.
"""

from collections.abc import Mapping
from typing import Any, Generic, Optional, TypeVar

from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from app.shared.errors.codes import ErrorCode
from app.shared.request_context import get_request_id

T = TypeVar("T")

DEFAULT_SUCCESS_MESSAGE = "success"


class ResponseEnvelope(BaseModel, Generic[T]):
    """The single wire shape for every response."""

    model_config = ConfigDict(populate_by_name=True)

    code: int
    message: str
    data: T | None = None
    request_id: str = Field(alias="requestId")


class PageEnvelope(BaseModel, Generic[T]):
    """One page of a paginated listing."""

    model_config = ConfigDict(populate_by_name=True)

    total: int = Field(ge=0)
    page: int = Field(ge=1)
    page_size: int = Field(alias="pageSize", ge=1)
    items: list[T] = Field(alias="list")


def success(message: str = "", data: Any = None) -> ResponseEnvelope:
    """Build a success envelope for the active request.

    Args:
        message: Message for the caller; empty means ``"success"``.
        data: Payload of any shape.

    Returns:
        Envelope with ``code`` 200, sent with HTTP status 200.
    """
    return ResponseEnvelope(
        code=int(ErrorCode.SUCCESS),
        message=message or DEFAULT_SUCCESS_MESSAGE,
        data=data,
        request_id=get_request_id(),
    )


def success_page(
    message: str, total: int, page: int, page_size: int, items: list
) -> ResponseEnvelope:
    """Wrap one page of ``items`` and delegate to ``success``."""
    page_data = PageEnvelope(total=total, page=page, page_size=page_size, items=items)
    return success(message, page_data)


def failure(
    http_status: int,
    code: int,
    message: str,
    headers: Optional[Mapping[str, str]] = None,
) -> JSONResponse:
    """Build the error response for the active request.

    The returned response is the only one written for the request; callers
    return it straight away. ``headers`` are copied onto it (for example
    ``Allow`` on a 405).
    """
    envelope = ResponseEnvelope(
        code=code, message=message, data=None, request_id=get_request_id()
    )
    return JSONResponse(
        status_code=http_status,
        content=envelope.model_dump(by_alias=True),
        headers=dict(headers) if headers else None,
    )
