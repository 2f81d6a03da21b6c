"""
Use case: Partially update a demo record.

Input: UpdateDemoCommand (ID plus optional field1, field2)
Output: None
Side effects: Updates one row.
Failure cases:
    EmptyDemoPatchError if no field is provided.
    DemoNotFoundError if the record is missing or soft deleted.
    BusinessError DUPLICATE_KEY if the new field1 is already taken.
"""

import logging

from app.application.demo.dtos import UpdateDemoCommand
from app.domain.demo.entities import DemoPatch
from app.domain.demo.errors import DemoNotFoundError, EmptyDemoPatchError
from app.domain.demo.ports import DemoRepository

logger = logging.getLogger(__name__)


class UpdateDemoUseCase:
    """Orchestrates a validated partial update.

    The command is turned into an explicit patch; an empty patch is
    rejected before the repository is touched.
    """

    def __init__(self, demo_repo: DemoRepository) -> None:
        self._demo_repo = demo_repo

    def execute(self, command: UpdateDemoCommand) -> None:
        """Apply the provided fields to the record.

        Args:
            command: Target ID and the fields to change.

        Raises:
            EmptyDemoPatchError: If neither field is set.
            DemoNotFoundError: If no live record has this ID.
        """
        patch = DemoPatch(field1=command.field1, field2=command.field2)
        if patch.is_empty():
            raise EmptyDemoPatchError()

        if not self._demo_repo.update(command.demo_id, patch):
            raise DemoNotFoundError(command.demo_id)
        logger.info("Updated demo %d: %s", command.demo_id, sorted(patch.changes()))
