"""
Use case: Soft delete a demo record.

Input: demo ID
Output: None
Side effects: Flags the row as deleted; it stays in the table.
Failure cases: DemoNotFoundError if the record is missing or already deleted.
"""

import logging

from app.domain.demo.errors import DemoNotFoundError
from app.domain.demo.ports import DemoRepository

logger = logging.getLogger(__name__)


class SoftDeleteDemoUseCase:
    """Orchestrates flagging a record as deleted."""

    def __init__(self, demo_repo: DemoRepository) -> None:
        self._demo_repo = demo_repo

    def execute(self, demo_id: int) -> None:
        if not self._demo_repo.soft_delete(demo_id):
            raise DemoNotFoundError(demo_id)
        logger.info("Soft deleted demo %d", demo_id)
