"""
Error translator.

Maps any exception to the HTTP status, business code and message sent to
the caller. This is the only place where request failures are logged:
repositories and use cases classify and propagate, they never log.
"""

import logging
from typing import NamedTuple

from app.shared.errors.codes import ErrorCode
from app.shared.errors.exceptions import BusinessError, InternalSystemError

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_500 = 500

UNKNOWN_ERROR_MESSAGE = "unknown server error"


class ErrorTranslation(NamedTuple):
    """What the caller sees for a failed request."""

    http_status: int
    code: int
    message: str


def _classify(err: BaseException) -> ErrorTranslation:
    if isinstance(err, BusinessError):
        return ErrorTranslation(HTTP_400, int(err.code), err.message)
    if isinstance(err, InternalSystemError):
        return ErrorTranslation(HTTP_500, int(ErrorCode.INTERNAL_SERVER_ERROR), str(err))
    return ErrorTranslation(
        HTTP_500, int(ErrorCode.INTERNAL_SERVER_ERROR), UNKNOWN_ERROR_MESSAGE
    )


def translate(err: BaseException) -> ErrorTranslation:
    """Translate ``err`` into ``(http_status, code, message)``.

    Business errors (validation failures included) map to 400 with their own
    code and message. System errors map to 500/50001 with their descriptive
    message. Anything else maps to 500/50001 with a generic message, so the
    original cause is never shown.

    The underlying cause is always logged at ERROR level together with the
    chosen status and code. Never raises.

    Args:
        err: The exception raised while handling the request.

    Returns:
        The translation to send to the caller.
    """
    result = _classify(err)
    cause = err.cause if isinstance(err, InternalSystemError) else err
    logger.error(
        "Request failed: status=%d code=%d message=%s cause=%r",
        result.http_status,
        result.code,
        result.message,
        cause,
        exc_info=cause if result.http_status >= HTTP_500 else None,
    )
    return result
