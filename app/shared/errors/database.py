"""
Translation boundary between raw database errors and the error taxonomy.

Repositories call ``raise_for_write_error`` from their ``except`` blocks:
unique-constraint violations become a duplicate-key BusinessError naming
the offending field, everything else becomes an InternalSystemError.
"""

import re
from typing import NamedTuple, NoReturn

from sqlalchemy.exc import DBAPIError, SQLAlchemyError

from app.shared.errors.codes import ErrorCode
from app.shared.errors.exceptions import BusinessError, InternalSystemError

MYSQL_DUPLICATE_ENTRY = 1062
POSTGRES_UNIQUE_VIOLATION = "23505"
UNKNOWN_FIELD = "unknown"

# Drivers raise OverflowError, outside the SQLAlchemy hierarchy, for integers
# their column type cannot bind.
DATABASE_ERRORS = (SQLAlchemyError, OverflowError)

_MYSQL_ENTRY = re.compile(r"Duplicate entry '(?P<value>.*)' for key ")
_MYSQL_KEY = re.compile(r"for key '(?:[^'.]+\.)?(?P<field>[^'.]+)'")
_POSTGRES_KEY = re.compile(r"Key \((?P<field>[^)]+)\)=\((?P<value>.*)\) already exists")
_SQLITE_KEY = re.compile(r"UNIQUE constraint failed: (?:[^.\s,]+\.)?(?P<field>[^\s,]+)")


class UniqueViolation(NamedTuple):
    """Outcome of inspecting a raw database error for a duplicate key."""

    is_violation: bool
    field: str
    value: str


NOT_A_VIOLATION = UniqueViolation(False, "", "")


def _driver_error(exc: BaseException) -> BaseException:
    if isinstance(exc, DBAPIError) and exc.orig is not None:
        return exc.orig
    return exc


def _error_number(exc: BaseException) -> object:
    args = getattr(exc, "args", ())
    return args[0] if args else None


def _parse_mysql(message: str) -> UniqueViolation:
    """Parse ``Duplicate entry '<value>' for key '<table>.<field>'``."""
    entry = _MYSQL_ENTRY.search(message)
    if entry is None:
        return NOT_A_VIOLATION
    key = _MYSQL_KEY.search(message, entry.end() - len("for key "))
    if key is None:
        return UniqueViolation(True, UNKNOWN_FIELD, "")
    return UniqueViolation(True, key.group("field"), entry.group("value"))


def classify_unique_violation(raw_error: BaseException) -> UniqueViolation:
    """Report whether ``raw_error`` is a unique-constraint violation.

    Recognises MySQL (error 1062), PostgreSQL (SQLSTATE 23505) and SQLite
    messages. Parsing is best effort and never raises.

    Args:
        raw_error: A driver exception or the SQLAlchemy exception wrapping it.

    Returns:
        ``(True, field, value)`` for a violation; ``field`` is ``"unknown"``
        when the key cannot be read from the message. ``(False, "", "")``
        otherwise.
    """
    err = _driver_error(raw_error)

    if _error_number(err) == MYSQL_DUPLICATE_ENTRY:
        args = err.args
        message = str(args[1]) if len(args) > 1 else str(err)
        return _parse_mysql(message)

    if getattr(err, "pgcode", None) == POSTGRES_UNIQUE_VIOLATION:
        match = _POSTGRES_KEY.search(str(err))
        if match is None:
            return UniqueViolation(True, UNKNOWN_FIELD, "")
        return UniqueViolation(True, match.group("field"), match.group("value"))

    match = _SQLITE_KEY.search(str(err))
    if match is not None:
        return UniqueViolation(True, match.group("field"), "")

    return NOT_A_VIOLATION


def duplicate_key_error(field: str, value: str = "") -> BusinessError:
    """Build the BusinessError reported for a duplicate unique value."""
    if value:
        message = f"{field} '{value}' already exists"
    else:
        message = f"{field} already exists"
    return BusinessError(ErrorCode.DUPLICATE_KEY, message)


def raise_for_write_error(exc: Exception, action: str, value: object = None) -> NoReturn:
    """Re-raise a failed write as a classified application error.

    Args:
        exc: The exception raised by the database layer.
        action: Short description of the failed write, used in the message.
        value: The value the caller tried to store in the unique column,
            used when the driver message does not carry it.

    Raises:
        BusinessError: For unique-constraint violations.
        InternalSystemError: For every other failure.
    """
    violation = classify_unique_violation(exc)
    mysql_duplicate = _error_number(_driver_error(exc)) == MYSQL_DUPLICATE_ENTRY
    if not violation.is_violation and mysql_duplicate:
        # 1062 with an unexpected message is still a duplicate key.
        violation = UniqueViolation(True, UNKNOWN_FIELD, "")
    if violation.is_violation:
        shown = violation.value or ("" if value is None else str(value))
        raise duplicate_key_error(violation.field, shown) from exc
    raise InternalSystemError(exc, f"{action} failed") from exc
