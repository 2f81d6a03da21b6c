"""
Adapter: Demo repository.

Implements DemoRepository port on top of SQLAlchemy.
Raw database errors are classified here and never leave this module:
unique violations become duplicate-key business errors, everything else
becomes an InternalSystemError.
"""

from typing import Optional

from sqlalchemy import delete, func, select, update

from app.core.database import Database
from app.domain.demo.entities import (
    ACTIVE_FLAG,
    DELETED_FLAG,
    Demo,
    DemoFilter,
    DemoPatch,
    NewDemo,
)
from app.domain.demo.ports import DemoRepository
from app.infrastructure.demo.models import DemoModel
from app.shared.errors import InternalSystemError
from app.shared.errors.database import DATABASE_ERRORS, raise_for_write_error

_LIVE = DemoModel.is_deleted == ACTIVE_FLAG


class DemoRepositoryAdapter(DemoRepository):
    """Relational implementation of the demo repository.

    Soft-deleted rows are invisible to every read and update.
    """

    def __init__(self, database: Database) -> None:
        self._db = database

    def find_all(self, criteria: DemoFilter) -> list[Demo]:
        """Return live records matching the non-empty filters, by ID."""
        query = select(DemoModel).where(_LIVE)
        if criteria.field1 is not None:
            query = query.where(DemoModel.field1 == criteria.field1)
        if criteria.field2:
            query = query.where(DemoModel.field2 == criteria.field2)
        try:
            with self._db.session() as session:
                rows = session.scalars(query.order_by(DemoModel.id)).all()
        except DATABASE_ERRORS as exc:
            raise InternalSystemError(exc, "query demo list failed") from exc
        return [row.to_entity() for row in rows]

    def find_page(self, page: int, page_size: int) -> tuple[list[Demo], int]:
        """Return the requested page of live records and their total count."""
        offset = (page - 1) * page_size
        count_query = select(func.count()).select_from(DemoModel).where(_LIVE)
        page_query = (
            select(DemoModel)
            .where(_LIVE)
            .order_by(DemoModel.id)
            .offset(offset)
            .limit(page_size)
        )
        try:
            with self._db.session() as session:
                total = session.scalar(count_query) or 0
                rows = session.scalars(page_query).all()
        except DATABASE_ERRORS as exc:
            raise InternalSystemError(exc, "query demo page failed") from exc
        return [row.to_entity() for row in rows], total

    def get_by_id(self, demo_id: int) -> Optional[Demo]:
        query = select(DemoModel).where(DemoModel.id == demo_id, _LIVE)
        try:
            with self._db.session() as session:
                row = session.scalars(query).one_or_none()
        except DATABASE_ERRORS as exc:
            raise InternalSystemError(exc, "query demo failed") from exc
        return row.to_entity() if row is not None else None

    def create(self, demo: NewDemo) -> int:
        row = DemoModel(field1=demo.field1, field2=demo.field2)
        try:
            with self._db.session() as session:
                session.add(row)
                session.commit()
                return row.id
        except DATABASE_ERRORS as exc:
            raise_for_write_error(exc, "insert demo", demo.field1)

    def create_many(self, demos: list[NewDemo]) -> None:
        if not demos:
            return
        rows = [DemoModel(field1=d.field1, field2=d.field2) for d in demos]
        try:
            with self._db.session() as session:
                session.add_all(rows)
                session.commit()
        except DATABASE_ERRORS as exc:
            raise_for_write_error(exc, "batch insert demo")

    def update(self, demo_id: int, patch: DemoPatch) -> bool:
        statement = (
            update(DemoModel)
            .where(DemoModel.id == demo_id, _LIVE)
            .values(**patch.changes())
        )
        try:
            with self._db.session() as session:
                result = session.execute(statement)
                session.commit()
        except DATABASE_ERRORS as exc:
            raise_for_write_error(exc, "update demo", patch.field1)
        return result.rowcount > 0

    def soft_delete(self, demo_id: int) -> bool:
        statement = (
            update(DemoModel)
            .where(DemoModel.id == demo_id, _LIVE)
            .values(is_deleted=DELETED_FLAG)
        )
        try:
            with self._db.session() as session:
                result = session.execute(statement)
                session.commit()
        except DATABASE_ERRORS as exc:
            raise_for_write_error(exc, "soft delete demo")
        return result.rowcount > 0

    def delete(self, demo_id: int) -> bool:
        statement = delete(DemoModel).where(DemoModel.id == demo_id)
        try:
            with self._db.session() as session:
                result = session.execute(statement)
                session.commit()
        except DATABASE_ERRORS as exc:
            raise_for_write_error(exc, "delete demo")
        return result.rowcount > 0
