"""
Tests for the SQLAlchemy demo repository.

Runs against an in-memory SQLite database built by the ``database`` fixture.
"""

import pytest

from app.core.database import Database
from app.domain.demo.entities import DELETED_FLAG, DemoFilter, DemoPatch, NewDemo
from app.infrastructure.demo.demo_repository import DemoRepositoryAdapter
from app.infrastructure.demo.models import DemoModel
from app.shared.errors import BusinessError, ErrorCode, InternalSystemError


@pytest.fixture
def repo(database: Database) -> DemoRepositoryAdapter:
    return DemoRepositoryAdapter(database)


class TestCreate:
    """Tests for single and batch inserts."""

    def test_create_returns_id_and_persists(self, repo: DemoRepositoryAdapter) -> None:
        """Create stores the row as live and returns its id."""
        demo_id = repo.create(NewDemo(field1=1, field2="one"))
        demo = repo.get_by_id(demo_id)
        assert demo is not None
        assert (demo.field1, demo.field2, demo.is_deleted) == (1, "one", "N")
        assert demo.create_time is not None

    def test_duplicate_field1_is_a_business_error(
        self, repo: DemoRepositoryAdapter
    ) -> None:
        """A second record with the same field1 raises a 30002 error."""
        repo.create(NewDemo(field1=1, field2="one"))
        with pytest.raises(BusinessError) as info:
            repo.create(NewDemo(field1=1, field2="again"))
        assert info.value.code == ErrorCode.DUPLICATE_KEY
        assert info.value.message == "field1 '1' already exists"

    def test_batch_create_inserts_all(self, repo: DemoRepositoryAdapter) -> None:
        """Batch create stores every record."""
        repo.create_many([NewDemo(field1=i, field2=f"n{i}") for i in range(1, 4)])
        assert [d.field1 for d in repo.find_all(DemoFilter())] == [1, 2, 3]

    def test_batch_create_is_all_or_nothing(self, repo: DemoRepositoryAdapter) -> None:
        """One duplicate in a batch rolls back the whole batch."""
        repo.create(NewDemo(field1=2, field2="existing"))
        with pytest.raises(BusinessError) as info:
            repo.create_many([NewDemo(field1=i, field2="") for i in range(1, 4)])
        assert info.value.code == ErrorCode.DUPLICATE_KEY
        assert [d.field1 for d in repo.find_all(DemoFilter())] == [2]

    def test_empty_batch_is_a_no_op(self, repo: DemoRepositoryAdapter) -> None:
        """An empty batch stores nothing and does not fail."""
        repo.create_many([])
        assert repo.find_all(DemoFilter()) == []


class TestReads:
    """Tests for list, page and get."""

    def test_filters_combine(self, repo: DemoRepositoryAdapter) -> None:
        """field1 and field2 filters apply alone and together."""
        repo.create(NewDemo(field1=1, field2="a"))
        repo.create(NewDemo(field1=2, field2="b"))
        repo.create(NewDemo(field1=3, field2="a"))

        assert [d.field1 for d in repo.find_all(DemoFilter(field2="a"))] == [1, 3]
        assert [d.field1 for d in repo.find_all(DemoFilter(field1=2))] == [2]
        assert repo.find_all(DemoFilter(field1=2, field2="a")) == []

    def test_page_slices_in_id_order(self, repo: DemoRepositoryAdapter) -> None:
        """Pages are ordered by id and the total counts all live rows."""
        repo.create_many([NewDemo(field1=i, field2="") for i in range(1, 26)])

        items, total = repo.find_page(2, 10)
        assert total == 25
        assert [d.field1 for d in items] == list(range(11, 21))

        items, total = repo.find_page(4, 10)
        assert total == 25
        assert items == []

    def test_missing_record_is_none(self, repo: DemoRepositoryAdapter) -> None:
        """get_by_id returns None for an unknown id."""
        assert repo.get_by_id(999) is None


class TestSoftDelete:
    """Soft-deleted rows are invisible to reads and updates."""

    def test_soft_deleted_rows_are_hidden(self, repo: DemoRepositoryAdapter) -> None:
        """Soft-deleted rows disappear from get, list and page."""
        keep = repo.create(NewDemo(field1=1, field2=""))
        gone = repo.create(NewDemo(field1=2, field2=""))

        assert repo.soft_delete(gone) is True
        assert repo.get_by_id(gone) is None
        assert [d.id for d in repo.find_all(DemoFilter())] == [keep]
        assert repo.find_page(1, 10)[1] == 1

    def test_row_is_kept_with_deleted_flag(
        self, repo: DemoRepositoryAdapter, database: Database
    ) -> None:
        """Soft delete keeps the row and sets is_deleted to Y."""
        demo_id = repo.create(NewDemo(field1=1, field2=""))
        repo.soft_delete(demo_id)
        with database.session() as session:
            row = session.get(DemoModel, demo_id)
            assert row is not None
            assert row.is_deleted == DELETED_FLAG

    def test_second_soft_delete_matches_nothing(
        self, repo: DemoRepositoryAdapter
    ) -> None:
        """Soft deleting twice matches no row the second time."""
        demo_id = repo.create(NewDemo(field1=1, field2=""))
        assert repo.soft_delete(demo_id) is True
        assert repo.soft_delete(demo_id) is False

    def test_update_ignores_soft_deleted_rows(self, repo: DemoRepositoryAdapter) -> None:
        """Soft-deleted rows cannot be updated."""
        demo_id = repo.create(NewDemo(field1=1, field2=""))
        repo.soft_delete(demo_id)
        assert repo.update(demo_id, DemoPatch(field2="x")) is False


class TestUpdateAndDelete:
    """Tests for update and hard delete."""

    def test_update_changes_only_given_fields(self, repo: DemoRepositoryAdapter) -> None:
        """Only the patched field changes."""
        demo_id = repo.create(NewDemo(field1=1, field2="old"))
        assert repo.update(demo_id, DemoPatch(field2="new")) is True
        demo = repo.get_by_id(demo_id)
        assert demo is not None
        assert (demo.field1, demo.field2) == (1, "new")

    def test_update_to_taken_field1_is_duplicate(
        self, repo: DemoRepositoryAdapter
    ) -> None:
        """Updating field1 to a taken value raises a 30002 error."""
        repo.create(NewDemo(field1=1, field2=""))
        demo_id = repo.create(NewDemo(field1=2, field2=""))
        with pytest.raises(BusinessError) as info:
            repo.update(demo_id, DemoPatch(field1=1))
        assert info.value.code == ErrorCode.DUPLICATE_KEY

    def test_update_missing_row_returns_false(self, repo: DemoRepositoryAdapter) -> None:
        """Updating an unknown id reports no match."""
        assert repo.update(999, DemoPatch(field1=5)) is False

    def test_hard_delete_removes_row(
        self, repo: DemoRepositoryAdapter, database: Database
    ) -> None:
        """Hard delete removes the row; a second delete matches nothing."""
        demo_id = repo.create(NewDemo(field1=1, field2=""))
        assert repo.delete(demo_id) is True
        with database.session() as session:
            assert session.get(DemoModel, demo_id) is None
        assert repo.delete(demo_id) is False

    def test_hard_delete_also_removes_soft_deleted_rows(
        self, repo: DemoRepositoryAdapter
    ) -> None:
        """Hard delete ignores the soft-delete flag."""
        demo_id = repo.create(NewDemo(field1=1, field2=""))
        repo.soft_delete(demo_id)
        assert repo.delete(demo_id) is True


class TestDriverErrors:
    """Driver failures never leave the repository unclassified."""

    def test_oversized_id_on_read_is_a_system_error(
        self, repo: DemoRepositoryAdapter
    ) -> None:
        """An id the driver cannot bind becomes an InternalSystemError."""
        with pytest.raises(InternalSystemError) as info:
            repo.get_by_id(2**70)
        assert info.value.message == "query demo failed"

    def test_oversized_value_on_insert_is_a_system_error(
        self, repo: DemoRepositoryAdapter
    ) -> None:
        """A field1 the driver cannot bind becomes an InternalSystemError."""
        with pytest.raises(InternalSystemError) as info:
            repo.create(NewDemo(field1=2**70, field2=""))
        assert info.value.message == "insert demo failed"
        assert repo.find_all(DemoFilter()) == []
