"""
Application error taxonomy.

Lower layers raise these; only the error translator turns them into
HTTP responses and logs them. No framework imports allowed.

- BusinessError: an expected condition shown to the caller verbatim.
- ValidationFailure: malformed or unbindable input, a BusinessError.
- InternalSystemError: an unexpected infrastructure failure wrapping its cause.

Any exception outside this hierarchy is an unknown error.
"""

from app.shared.errors.codes import ErrorCode


class AppError(Exception):
    """Base class for every classified application error."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class BusinessError(AppError):
    """Raised for expected, user-facing failures (not found, duplicate key).

    Attributes:
        code: Business code from ``ErrorCode``.
        message: Human readable message returned to the caller.
    """

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = ErrorCode(code)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={int(self.code)}, message={self.message!r})"


class ValidationFailure(BusinessError):
    """Raised when request input cannot be bound or fails validation."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.PARAM_INVALID) -> None:
        super().__init__(code, message)


class InternalSystemError(AppError):
    """Raised for unexpected failures such as an unreachable database.

    The original exception is kept on ``cause`` (and chained as
    ``__cause__`` when raised with ``raise ... from``) for logging.

    Attributes:
        cause: The underlying exception.
        message: Descriptive message without driver internals.
    """

    def __init__(self, cause: BaseException, message: str | None = None) -> None:
        super().__init__(message or f"{type(cause).__name__}: {cause}")
        self.cause = cause
