"""
Domain-specific errors for the demo bounded context.

These are mapped to HTTP responses by the shared error translator.
No framework imports allowed.
"""

from app.shared.errors import BusinessError, ErrorCode, ValidationFailure


class DemoNotFoundError(BusinessError):
    """Raised when a demo record does not exist or was soft deleted."""

    def __init__(self, demo_id: int) -> None:
        super().__init__(
            ErrorCode.RESOURCE_NOT_FOUND,
            f"demo {demo_id} does not exist or has been deleted",
        )
        self.demo_id = demo_id


class EmptyDemoPatchError(ValidationFailure):
    """Raised when an update request carries no attribute to change."""

    def __init__(self) -> None:
        super().__init__("no fields to update")
