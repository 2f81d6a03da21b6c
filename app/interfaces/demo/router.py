"""
FastAPI router for the demo bounded context.

All routes delegate to use cases and wrap their result in the standard
envelope. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Path, Query

from app.application.demo.batch_create_demos import BatchCreateDemosUseCase
from app.application.demo.create_demo import CreateDemoUseCase
from app.application.demo.delete_demo import DeleteDemoUseCase
from app.application.demo.dtos import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    CreateDemoCommand,
    ListDemoPageQuery,
    ListDemosQuery,
    UpdateDemoCommand,
)
from app.application.demo.get_demo import GetDemoUseCase
from app.application.demo.list_demo_page import ListDemoPageUseCase
from app.application.demo.list_demos import ListDemosUseCase
from app.application.demo.soft_delete_demo import SoftDeleteDemoUseCase
from app.application.demo.update_demo import UpdateDemoUseCase
from app.interfaces.demo.dependencies import (
    get_batch_create_demos_use_case,
    get_create_demo_use_case,
    get_delete_demo_use_case,
    get_demo_use_case,
    get_list_demo_page_use_case,
    get_list_demos_use_case,
    get_soft_delete_demo_use_case,
    get_update_demo_use_case,
)
from app.interfaces.demo.schemas import (
    INT_MAX,
    INT_MIN,
    MAX_PAGE_SIZE,
    DemoCreatedResponse,
    DemoCreateRequest,
    DemoItem,
    DemoUpdateRequest,
)
from app.shared.responses import (
    PageEnvelope,
    ResponseEnvelope,
    success,
    success_page,
)

router = APIRouter(prefix="/demo", tags=["demo"])

DemoId = Annotated[int, Path(ge=INT_MIN, le=INT_MAX)]

ERROR_RESPONSES = {
    400: {"model": ResponseEnvelope[None]},
    500: {"model": ResponseEnvelope[None]},
}


@router.get(
    "",
    response_model=ResponseEnvelope[list[DemoItem]],
    responses=ERROR_RESPONSES,
    summary="List demo records",
)
def list_demos(
    field1: Optional[int] = Query(None, ge=INT_MIN, le=INT_MAX),
    field2: Optional[str] = None,
    use_case: ListDemosUseCase = Depends(get_list_demos_use_case),
) -> ResponseEnvelope:
    """List live records, optionally filtered by field1 and field2."""
    results = use_case.execute(ListDemosQuery(field1=field1, field2=field2))
    return success("fetched", [DemoItem.model_validate(r) for r in results])


@router.get(
    "/page",
    response_model=ResponseEnvelope[PageEnvelope[DemoItem]],
    responses=ERROR_RESPONSES,
    summary="List demo records page by page",
)
def list_demo_page(
    page: int = Query(DEFAULT_PAGE, le=INT_MAX),
    page_size: int = Query(DEFAULT_PAGE_SIZE, alias="pageSize", le=MAX_PAGE_SIZE),
    use_case: ListDemoPageUseCase = Depends(get_list_demo_page_use_case),
) -> ResponseEnvelope:
    """Return one page; page < 1 means 1, pageSize < 1 means 10.

    pageSize is capped at 1000 so the row offset stays within range.
    """
    result = use_case.execute(ListDemoPageQuery(page=page, page_size=page_size))
    return success_page(
        "fetched",
        result.total,
        result.page,
        result.page_size,
        [DemoItem.model_validate(r) for r in result.items],
    )


@router.get(
    "/{demo_id}",
    response_model=ResponseEnvelope[DemoItem],
    responses=ERROR_RESPONSES,
    summary="Get a demo record",
)
def get_demo(
    demo_id: DemoId,
    use_case: GetDemoUseCase = Depends(get_demo_use_case),
) -> ResponseEnvelope:
    result = use_case.execute(demo_id)
    return success("fetched", DemoItem.model_validate(result))


@router.post(
    "",
    response_model=ResponseEnvelope[DemoCreatedResponse],
    responses=ERROR_RESPONSES,
    summary="Create a demo record",
)
def create_demo(
    request: DemoCreateRequest,
    use_case: CreateDemoUseCase = Depends(get_create_demo_use_case),
) -> ResponseEnvelope:
    result = use_case.execute(
        CreateDemoCommand(field1=request.field1, field2=request.field2)
    )
    return success("created", DemoCreatedResponse(id=result.id))


@router.post(
    "/batch",
    response_model=ResponseEnvelope[None],
    responses=ERROR_RESPONSES,
    summary="Create several demo records",
)
def batch_create_demos(
    request: list[DemoCreateRequest],
    use_case: BatchCreateDemosUseCase = Depends(get_batch_create_demos_use_case),
) -> ResponseEnvelope:
    """Insert all records or none of them."""
    use_case.execute(
        [CreateDemoCommand(field1=r.field1, field2=r.field2) for r in request]
    )
    return success("batch created")


@router.put(
    "/{demo_id}",
    response_model=ResponseEnvelope[None],
    responses=ERROR_RESPONSES,
    summary="Update a demo record",
)
def update_demo(
    demo_id: DemoId,
    request: DemoUpdateRequest,
    use_case: UpdateDemoUseCase = Depends(get_update_demo_use_case),
) -> ResponseEnvelope:
    use_case.execute(
        UpdateDemoCommand(
            demo_id=demo_id, field1=request.field1, field2=request.field2
        )
    )
    return success("updated")


@router.delete(
    "/soft/{demo_id}",
    response_model=ResponseEnvelope[None],
    responses=ERROR_RESPONSES,
    summary="Soft delete a demo record",
)
def soft_delete_demo(
    demo_id: DemoId,
    use_case: SoftDeleteDemoUseCase = Depends(get_soft_delete_demo_use_case),
) -> ResponseEnvelope:
    use_case.execute(demo_id)
    return success("deleted")


@router.delete(
    "/hard/{demo_id}",
    response_model=ResponseEnvelope[None],
    responses=ERROR_RESPONSES,
    summary="Delete a demo record permanently",
)
def delete_demo(
    demo_id: DemoId,
    use_case: DeleteDemoUseCase = Depends(get_delete_demo_use_case),
) -> ResponseEnvelope:
    use_case.execute(demo_id)
    return success("deleted")
