"""
Domain entities for the demo bounded context.

Entities contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

DELETED_FLAG = "Y"
ACTIVE_FLAG = "N"


@dataclass(frozen=True)
class Demo:
    """A stored demo record.

    Attributes:
        id: Primary key assigned by the database.
        field1: Integer attribute, unique across records.
        field2: Free text attribute (up to 255 characters).
        is_deleted: ``"Y"`` once soft deleted, ``"N"`` otherwise.
        create_time: When the record was inserted.
        update_time: When the record was last modified.
    """

    id: int
    field1: int
    field2: str
    is_deleted: str = ACTIVE_FLAG
    create_time: Optional[datetime] = None
    update_time: Optional[datetime] = None


@dataclass(frozen=True)
class NewDemo:
    """Values for a record that has not been stored yet."""

    field1: int
    field2: str


@dataclass(frozen=True)
class DemoFilter:
    """Optional equality filters for listing demo records."""

    field1: Optional[int] = None
    field2: Optional[str] = None


@dataclass(frozen=True)
class DemoPatch:
    """Partial update: only the attributes that are set are changed."""

    field1: Optional[int] = None
    field2: Optional[str] = None

    def is_empty(self) -> bool:
        return self.field1 is None and self.field2 is None

    def changes(self) -> dict[str, object]:
        """Return the column-level update set for the attributes provided."""
        values: dict[str, object] = {}
        if self.field1 is not None:
            values["field1"] = self.field1
        if self.field2 is not None:
            values["field2"] = self.field2
        return values
