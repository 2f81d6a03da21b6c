"""
Use case: Permanently delete a demo record.

Input: demo ID
Output: None
Side effects: Removes the row, including soft deleted ones.
Failure cases: DemoNotFoundError if no row has this ID.
"""

import logging

from app.domain.demo.errors import DemoNotFoundError
from app.domain.demo.ports import DemoRepository

logger = logging.getLogger(__name__)


class DeleteDemoUseCase:
    """Orchestrates removing a record from storage."""

    def __init__(self, demo_repo: DemoRepository) -> None:
        self._demo_repo = demo_repo

    def execute(self, demo_id: int) -> None:
        if not self._demo_repo.delete(demo_id):
            raise DemoNotFoundError(demo_id)
        logger.info("Deleted demo %d", demo_id)
