"""
Business codes carried in the ``code`` field of every response envelope.

200 means success; every other value identifies a failure kind. Codes are
grouped by range: 1xxxx request parameters, 2xxxx permissions,
3xxxx resources, 5xxxx server side.
"""

from enum import IntEnum


class ErrorCode(IntEnum):
    """Unified business codes (single source of truth)."""

    SUCCESS = 200

    # Request parameters
    PARAM_INVALID = 10001
    PARAM_BIND = 10002
    PARAM_TYPE = 10003
    PARAM_OUT_OF_RANGE = 10004
    DATA_FORMAT = 10005

    # Permissions
    PERMISSION_DENIED = 20001

    # Resources
    RESOURCE_NOT_FOUND = 30001
    DUPLICATE_KEY = 30002

    # Server
    INTERNAL_SERVER_ERROR = 50001
