"""
Dependency injection for the demo bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection. The database handle
is owned by the application lifespan and read from ``app.state``.
"""

from fastapi import Depends, Request

from app.application.demo.batch_create_demos import BatchCreateDemosUseCase
from app.application.demo.create_demo import CreateDemoUseCase
from app.application.demo.delete_demo import DeleteDemoUseCase
from app.application.demo.get_demo import GetDemoUseCase
from app.application.demo.list_demo_page import ListDemoPageUseCase
from app.application.demo.list_demos import ListDemosUseCase
from app.application.demo.soft_delete_demo import SoftDeleteDemoUseCase
from app.application.demo.update_demo import UpdateDemoUseCase
from app.core.database import Database
from app.domain.demo.ports import DemoRepository
from app.infrastructure.demo.demo_repository import DemoRepositoryAdapter


def get_database(request: Request) -> Database:
    """Return the database handle created at startup."""
    return request.app.state.database


def get_demo_repository(database: Database = Depends(get_database)) -> DemoRepository:
    return DemoRepositoryAdapter(database)


def get_list_demos_use_case(
    repo: DemoRepository = Depends(get_demo_repository),
) -> ListDemosUseCase:
    return ListDemosUseCase(demo_repo=repo)


def get_list_demo_page_use_case(
    repo: DemoRepository = Depends(get_demo_repository),
) -> ListDemoPageUseCase:
    return ListDemoPageUseCase(demo_repo=repo)


def get_demo_use_case(
    repo: DemoRepository = Depends(get_demo_repository),
) -> GetDemoUseCase:
    return GetDemoUseCase(demo_repo=repo)


def get_create_demo_use_case(
    repo: DemoRepository = Depends(get_demo_repository),
) -> CreateDemoUseCase:
    return CreateDemoUseCase(demo_repo=repo)


def get_batch_create_demos_use_case(
    repo: DemoRepository = Depends(get_demo_repository),
) -> BatchCreateDemosUseCase:
    return BatchCreateDemosUseCase(demo_repo=repo)


def get_update_demo_use_case(
    repo: DemoRepository = Depends(get_demo_repository),
) -> UpdateDemoUseCase:
    return UpdateDemoUseCase(demo_repo=repo)


def get_soft_delete_demo_use_case(
    repo: DemoRepository = Depends(get_demo_repository),
) -> SoftDeleteDemoUseCase:
    return SoftDeleteDemoUseCase(demo_repo=repo)


def get_delete_demo_use_case(
    repo: DemoRepository = Depends(get_demo_repository),
) -> DeleteDemoUseCase:
    return DeleteDemoUseCase(demo_repo=repo)
