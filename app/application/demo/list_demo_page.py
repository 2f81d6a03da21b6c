"""
Use case: Page through demo records.

Input: ListDemoPageQuery (page, page_size)
Output: DemoPageResult
Side effects: None (read-only query).
Failure cases: InternalSystemError when the database cannot be queried.
"""

from app.application.demo.dtos import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    DemoPageResult,
    ListDemoPageQuery,
    to_demo_result,
)
from app.domain.demo.ports import DemoRepository


class ListDemoPageUseCase:
    """Orchestrates paginated listing. Out-of-range paging falls back to defaults."""

    def __init__(self, demo_repo: DemoRepository) -> None:
        self._demo_repo = demo_repo

    def execute(self, query: ListDemoPageQuery) -> DemoPageResult:
        page = query.page if query.page >= 1 else DEFAULT_PAGE
        page_size = query.page_size if query.page_size >= 1 else DEFAULT_PAGE_SIZE

        demos, total = self._demo_repo.find_page(page, page_size)
        return DemoPageResult(
            items=[to_demo_result(demo) for demo in demos],
            total=total,
            page=page,
            page_size=page_size,
        )
