"""
Use case: List demo records.

Input: ListDemosQuery (optional field1, field2 equality filters)
Output: list[DemoResult]
Side effects: None (read-only query).
Failure cases: InternalSystemError when the database cannot be queried.
"""

import logging

from app.application.demo.dtos import DemoResult, ListDemosQuery, to_demo_result
from app.domain.demo.entities import DemoFilter
from app.domain.demo.ports import DemoRepository

logger = logging.getLogger(__name__)


class ListDemosUseCase:
    """Orchestrates listing live demo records."""

    def __init__(self, demo_repo: DemoRepository) -> None:
        """Initialize the use case.

        Args:
            demo_repo: Repository for reading demo records.
        """
        self._demo_repo = demo_repo

    def execute(self, query: ListDemosQuery) -> list[DemoResult]:
        """Run the list use case.

        Args:
            query: Optional filters. An empty ``field2`` means no filter.

        Returns:
            Matching records ordered by ID.
        """
        logger.info("Listing demos: field1=%s, field2=%s", query.field1, query.field2)
        demos = self._demo_repo.find_all(
            DemoFilter(field1=query.field1, field2=query.field2 or None)
        )
        return [to_demo_result(demo) for demo in demos]
