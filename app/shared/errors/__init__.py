"""
Shared error handling package.

Centralizes the error taxonomy and its translation into API responses so
that every failure, whatever layer raised it, reaches the caller in the
same envelope with a consistent HTTP status and business code.
"""

from app.shared.errors.codes import ErrorCode
from app.shared.errors.exceptions import (
    AppError,
    BusinessError,
    InternalSystemError,
    ValidationFailure,
)
from app.shared.errors.translator import ErrorTranslation, translate

__all__ = [
    "AppError",
    "BusinessError",
    "ErrorCode",
    "ErrorTranslation",
    "InternalSystemError",
    "ValidationFailure",
    "translate",
]
