"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized error-to-envelope mapping)
- Request pipeline middleware (request id, access log, recovery)
- Logging configuration
- Database handle (opened at startup, disposed at shutdown)

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import Settings, settings as default_settings
from app.core.database import Database
from app.interfaces.demo.router import router as demo_router
from app.interfaces.health import router as health_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.middleware import AccessLogMiddleware, RecoveryMiddleware
from app.shared.request_context import RequestIdMiddleware

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: own the database handle.

    A failure here (unreachable database, bad schema) aborts startup, so the
    process never serves traffic without a working database.
    """
    settings: Settings = app.state.settings
    database = Database.from_settings(settings)
    if settings.db_auto_migrate:
        database.create_all()
    app.state.database = database
    logger.info(
        "%s started (env=%s, db=%s)",
        settings.project_name,
        settings.app_env,
        settings.db_driver,
    )

    try:
        yield
    finally:
        database.dispose()
        logger.info("%s stopped", settings.project_name)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and the request pipeline middleware.
    This is the composition root of the application.

    Args:
        settings: Settings to use; defaults to the environment settings.

    Returns:
        A fully configured FastAPI application instance.
    """
    settings = settings or default_settings
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        debug=settings.debug,
        docs_url=None if settings.is_production else "/docs",
        redoc_url=None if settings.is_production else "/redoc",
        lifespan=lifespan,
    )
    app.state.settings = settings

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Middleware (last added runs first) ---
    if settings.cors_allowed_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_allowed_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=["X-Request-Id"],
        )
    app.add_middleware(RecoveryMiddleware)
    app.add_middleware(AccessLogMiddleware)
    app.add_middleware(RequestIdMiddleware)

    # --- Routers ---
    app.include_router(health_router, prefix="/api")
    app.include_router(demo_router, prefix="/api")

    return app


def run(settings: Settings | None = None) -> None:
    """Serve the application on the configured port."""
    settings = settings or default_settings
    uvicorn.run(
        create_app(settings),
        host="0.0.0.0",
        port=settings.app_port,
        log_config=None,
    )


app = create_app()
