"""
Port interfaces (ABCs) for the demo bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.

Adapters raise only classified errors (BusinessError, InternalSystemError);
raw driver exceptions never cross this boundary.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.demo.entities import Demo, DemoFilter, DemoPatch, NewDemo


class DemoRepository(ABC):
    """Port for storing and retrieving demo records."""

    @abstractmethod
    def find_all(self, criteria: DemoFilter) -> list[Demo]:
        """Return every live record matching the filter."""
        raise NotImplementedError

    @abstractmethod
    def find_page(self, page: int, page_size: int) -> tuple[list[Demo], int]:
        """Return one page of live records and the total live count.

        Args:
            page: 1-based page number.
            page_size: Number of records per page.
        """
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, demo_id: int) -> Optional[Demo]:
        """Return a live record by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def create(self, demo: NewDemo) -> int:
        """Insert a record and return its new ID.

        Raises:
            BusinessError: With DUPLICATE_KEY when a unique value exists.
        """
        raise NotImplementedError

    @abstractmethod
    def create_many(self, demos: list[NewDemo]) -> None:
        """Insert several records in one transaction (all or nothing)."""
        raise NotImplementedError

    @abstractmethod
    def update(self, demo_id: int, patch: DemoPatch) -> bool:
        """Apply ``patch`` to a live record.

        Returns:
            False when no live record has this ID.
        """
        raise NotImplementedError

    @abstractmethod
    def soft_delete(self, demo_id: int) -> bool:
        """Flag a live record as deleted. Returns False if none matched."""
        raise NotImplementedError

    @abstractmethod
    def delete(self, demo_id: int) -> bool:
        """Remove a record permanently. Returns False if none matched."""
        raise NotImplementedError
