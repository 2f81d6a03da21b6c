"""
Use case: Fetch one demo record.

Input: demo ID
Output: DemoResult
Side effects: None (read-only query).
Failure cases: DemoNotFoundError if the record is missing or soft deleted.
"""

from app.application.demo.dtos import DemoResult, to_demo_result
from app.domain.demo.errors import DemoNotFoundError
from app.domain.demo.ports import DemoRepository


class GetDemoUseCase:
    """Orchestrates reading a single demo record by ID."""

    def __init__(self, demo_repo: DemoRepository) -> None:
        self._demo_repo = demo_repo

    def execute(self, demo_id: int) -> DemoResult:
        """Return the record with ``demo_id``.

        Raises:
            DemoNotFoundError: If no live record has this ID.
        """
        demo = self._demo_repo.get_by_id(demo_id)
        if demo is None:
            raise DemoNotFoundError(demo_id)
        return to_demo_result(demo)
