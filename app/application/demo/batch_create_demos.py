"""
Use case: Create several demo records at once.

Input: list[CreateDemoCommand]
Output: None
Side effects: Inserts every row in one transaction, or none of them.
Failure cases: BusinessError DUPLICATE_KEY if any field1 is already taken
    or repeated within the batch.
"""

import logging

from app.application.demo.dtos import CreateDemoCommand
from app.domain.demo.entities import NewDemo
from app.domain.demo.ports import DemoRepository

logger = logging.getLogger(__name__)


class BatchCreateDemosUseCase:
    """Orchestrates an all-or-nothing batch insert."""

    def __init__(self, demo_repo: DemoRepository) -> None:
        self._demo_repo = demo_repo

    def execute(self, commands: list[CreateDemoCommand]) -> None:
        demos = [NewDemo(field1=c.field1, field2=c.field2) for c in commands]
        self._demo_repo.create_many(demos)
        logger.info("Created %d demos in batch", len(demos))
