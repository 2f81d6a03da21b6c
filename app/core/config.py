"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, no scattered magic strings.
Settings are validated once at startup; an invalid value aborts the process
before any traffic is served.
"""

from typing import Annotated, Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict
from sqlalchemy.engine import URL

SUPPORTED_DRIVERS = ("mysql", "postgresql", "sqlite")

_DRIVER_NAMES = {
    "mysql": "mysql+pymysql",
    "postgresql": "postgresql+psycopg2",
    "sqlite": "sqlite",
}


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        app_env: Deployment environment (development, testing, production).
        app_port: TCP port the HTTP server listens on.
        cors_allowed_origins: Origins allowed by the CORS middleware.
        db_driver: Database backend (mysql, postgresql, sqlite).
        db_pool_max_open: Maximum number of open pooled connections.
        db_pool_max_idle: Connections kept open in the pool when idle.
        db_pool_conn_lifetime: Seconds before a pooled connection is recycled.
        db_auto_migrate: Create missing tables at startup.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Demo Service"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    app_env: Literal["development", "testing", "production"] = "development"
    app_port: int = Field(default=8080, ge=1, le=65535)
    cors_allowed_origins: Annotated[list[str], NoDecode] = Field(default_factory=list)

    db_driver: str = "mysql"
    db_host: str = "localhost"
    db_port: int = Field(default=3306, ge=1, le=65535)
    db_user: str = "root"
    db_password: str = ""
    db_name: str = "demo"
    db_pool_max_open: int = Field(default=100, ge=0)
    db_pool_max_idle: int = Field(default=10, ge=0)
    db_pool_conn_lifetime: int = Field(default=3600, ge=0)
    db_auto_migrate: bool = False

    @field_validator("cors_allowed_origins", mode="before")
    @classmethod
    def split_origins(cls, value: str | list[str]) -> list[str]:
        """Accept a comma separated string as well as a JSON list."""
        if isinstance(value, list):
            return value
        return [origin.strip() for origin in value.split(",") if origin.strip()]

    @field_validator("db_driver")
    @classmethod
    def check_driver(cls, value: str) -> str:
        driver = value.strip().lower()
        if driver not in SUPPORTED_DRIVERS:
            raise ValueError(
                f"unsupported database driver: {value!r} "
                f"(expected one of {', '.join(SUPPORTED_DRIVERS)})"
            )
        return driver

    @model_validator(mode="after")
    def check_database(self) -> "Settings":
        """Cross-field checks for the database section."""
        if not self.db_name:
            raise ValueError("db_name must not be empty")
        if self.db_driver != "sqlite":
            if not self.db_host:
                raise ValueError("db_host must not be empty")
            if not self.db_user:
                raise ValueError("db_user must not be empty")
        if self.app_env == "production" and not self.db_password:
            raise ValueError("db_password must not be empty in production")
        if 0 < self.db_pool_max_open < self.db_pool_max_idle:
            raise ValueError("db_pool_max_idle cannot exceed db_pool_max_open")
        return self

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    def database_url(self) -> URL:
        """Return the SQLAlchemy URL for the configured driver.

        For sqlite, ``db_name`` is the database file path (``:memory:``
        selects an in-process database).
        """
        if self.db_driver == "sqlite":
            return URL.create("sqlite", database=self.db_name)
        query = {"charset": "utf8mb4"} if self.db_driver == "mysql" else {}
        return URL.create(
            _DRIVER_NAMES[self.db_driver],
            username=self.db_user,
            password=self.db_password or None,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
            query=query,
        )


settings = Settings()
