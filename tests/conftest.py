"""
Shared fixtures.

Tests run against an in-memory SQLite database; no external services.
"""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.core.database import Database
from app.main import create_app


@pytest.fixture
def test_settings() -> Settings:
    """Settings for an isolated in-memory database with tables created."""
    return Settings(
        _env_file=None,
        app_env="testing",
        db_driver="sqlite",
        db_name=":memory:",
        db_auto_migrate=True,
    )


@pytest.fixture
def database(test_settings: Settings) -> Iterator[Database]:
    """A database handle with the schema in place."""
    db = Database.from_settings(test_settings)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def client(test_settings: Settings) -> Iterator[TestClient]:
    """A test client with the application lifespan running."""
    app = create_app(test_settings)
    with TestClient(app) as test_client:
        yield test_client
