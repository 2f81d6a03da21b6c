"""
Data Transfer Objects for the demo application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Optional

from app.domain.demo.entities import Demo

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class ListDemosQuery:
    """Input DTO for listing demo records with optional filters."""

    field1: Optional[int] = None
    field2: Optional[str] = None


@dataclass(frozen=True)
class ListDemoPageQuery:
    """Input DTO for one page of demo records.

    Attributes:
        page: 1-based page number. Values below 1 mean the first page.
        page_size: Records per page. Values below 1 mean the default size.
    """

    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE


@dataclass(frozen=True)
class CreateDemoCommand:
    """Input DTO for creating a demo record."""

    field1: int
    field2: str


@dataclass(frozen=True)
class UpdateDemoCommand:
    """Input DTO for a partial update; ``None`` leaves a field unchanged."""

    demo_id: int
    field1: Optional[int] = None
    field2: Optional[str] = None


@dataclass(frozen=True)
class DemoResult:
    """Output DTO for a single demo record."""

    id: int
    field1: int
    field2: str


@dataclass(frozen=True)
class DemoPageResult:
    """Output DTO for one page of demo records."""

    items: list[DemoResult]
    total: int
    page: int
    page_size: int


@dataclass(frozen=True)
class CreateDemoResult:
    """Output DTO for a newly created record."""

    id: int


def to_demo_result(demo: Demo) -> DemoResult:
    """Map a domain entity to its output DTO."""
    return DemoResult(id=demo.id, field1=demo.field1, field2=demo.field2)
