"""
Tests for application settings validation.
"""

import pytest
from pydantic import ValidationError

from app.core.config import Settings


def _settings(**overrides) -> Settings:
    return Settings(_env_file=None, **overrides)


class TestSettingsValidation:
    """Startup settings must be rejected before any traffic is served."""

    def test_defaults_are_valid(self) -> None:
        """Settings with no overrides load as a development MySQL setup."""
        settings = _settings()
        assert settings.app_env == "development"
        assert settings.db_driver == "mysql"

    def test_rejects_unknown_environment(self) -> None:
        """Only development, testing and production are accepted."""
        with pytest.raises(ValidationError):
            _settings(app_env="staging")

    @pytest.mark.parametrize("port", [0, 65536, -1])
    def test_rejects_out_of_range_port(self, port: int) -> None:
        """The listen port must lie within 1..65535."""
        with pytest.raises(ValidationError):
            _settings(app_port=port)

    def test_rejects_unsupported_driver(self) -> None:
        """Drivers other than mysql, postgresql and sqlite are refused."""
        with pytest.raises(ValidationError):
            _settings(db_driver="oracle")

    def test_driver_is_normalised(self) -> None:
        """Driver names are trimmed and lower-cased."""
        assert _settings(db_driver=" MySQL ").db_driver == "mysql"

    def test_requires_host_for_network_databases(self) -> None:
        """A network database without a host is rejected."""
        with pytest.raises(ValidationError):
            _settings(db_driver="postgresql", db_host="")

    def test_sqlite_needs_no_host_or_user(self) -> None:
        """SQLite only needs a database name, here an in-memory one."""
        url = _settings(
            db_driver="sqlite", db_host="", db_user="", db_name=":memory:"
        ).database_url()
        assert url.drivername == "sqlite"
        assert url.database == ":memory:"
        assert url.host is None

    def test_production_requires_password(self) -> None:
        """Production refuses an empty database password."""
        with pytest.raises(ValidationError):
            _settings(app_env="production", db_password="")
        assert _settings(app_env="production", db_password="s3cret").is_production

    def test_idle_connections_cannot_exceed_open(self) -> None:
        """max_idle above a positive max_open is rejected."""
        with pytest.raises(ValidationError):
            _settings(db_pool_max_open=5, db_pool_max_idle=10)

    def test_unlimited_open_connections_allow_any_idle(self) -> None:
        """max_open of zero means unlimited, so any idle limit is fine."""
        assert _settings(db_pool_max_open=0, db_pool_max_idle=10).db_pool_max_idle == 10

    def test_cors_origins_from_comma_separated_string(self) -> None:
        """CORS origins are split on commas and trimmed."""
        settings = _settings(cors_allowed_origins="http://a.test, http://b.test")
        assert settings.cors_allowed_origins == ["http://a.test", "http://b.test"]


class TestDatabaseUrl:
    """Tests for Settings.database_url."""

    def test_mysql_url(self) -> None:
        """MySQL URLs use PyMySQL and force the utf8mb4 charset."""
        url = _settings(
            db_driver="mysql",
            db_host="db.local",
            db_port=3307,
            db_user="app",
            db_password="pw",
            db_name="demo",
        ).database_url()
        assert url.drivername == "mysql+pymysql"
        assert (url.host, url.port, url.username, url.database) == (
            "db.local",
            3307,
            "app",
            "demo",
        )
        assert url.query["charset"] == "utf8mb4"

    def test_postgresql_url(self) -> None:
        """PostgreSQL URLs use psycopg2 and carry no charset."""
        url = _settings(db_driver="postgresql", db_port=5432).database_url()
        assert url.drivername == "postgresql+psycopg2"
        assert "charset" not in url.query
