"""
Use case: Create a demo record.

Input: CreateDemoCommand (field1, field2)
Output: CreateDemoResult (new ID)
Side effects: Inserts one row.
Failure cases: BusinessError DUPLICATE_KEY if field1 is already taken.
"""

import logging

from app.application.demo.dtos import CreateDemoCommand, CreateDemoResult
from app.domain.demo.entities import NewDemo
from app.domain.demo.ports import DemoRepository

logger = logging.getLogger(__name__)


class CreateDemoUseCase:
    """Orchestrates creating a demo record."""

    def __init__(self, demo_repo: DemoRepository) -> None:
        """Initialize the use case.

        Args:
            demo_repo: Repository for persisting demo records.
        """
        self._demo_repo = demo_repo

    def execute(self, command: CreateDemoCommand) -> CreateDemoResult:
        """Run the create use case.

        Args:
            command: Values of the new record.

        Returns:
            The ID assigned to the new record.
        """
        new_id = self._demo_repo.create(
            NewDemo(field1=command.field1, field2=command.field2)
        )
        logger.info("Created demo %d", new_id)
        return CreateDemoResult(id=new_id)
