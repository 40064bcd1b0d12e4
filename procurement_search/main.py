"""Procurement Search API — FastAPI application factory."""


import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from procurement_search.core.config import Settings, settings as default_settings
from procurement_search.core.exceptions import register_exception_handlers
from procurement_search.db.base import build_engine, build_session_factory, init_db
from procurement_search.middleware.audit import AuditMiddleware
from procurement_search.routers.buyers import router as buyers_router
from procurement_search.routers.records import router as records_router
from procurement_search.schemas.common import HealthResponse

logger = logging.getLogger(__name__)


def _configure_logging(settings: Settings) -> None:
    """Set up structured logging for the application."""
    level = logging.DEBUG if settings.app_env == "development" else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # Quiet noisy libraries
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _store_lifespan(settings: Settings):
    """Own the engine for the lifetime of the app when none was injected."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        engine = build_engine(settings)
        if settings.create_tables:
            await init_db(engine)
        app.state.session_factory = build_session_factory(engine)
        logger.info("Record store ready (%s)", engine.url.render_as_string(hide_password=True))
        try:
            yield
        finally:
            await engine.dispose()

    return lifespan


def create_app(
    settings: Settings | None = None,
    session_factory: async_sessionmaker[AsyncSession] | None = None,
) -> FastAPI:
    """Build the app.

    Pass `session_factory` to run against an existing store (tests, scripts);
    otherwise the app builds its own engine from `settings.database_url` on
    startup and disposes it on shutdown.
    """
    settings = settings or default_settings
    _configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version="1.0.0",
        docs_url="/docs" if settings.app_env == "development" else None,
        redoc_url="/redoc" if settings.app_env == "development" else None,
        lifespan=None if session_factory is not None else _store_lifespan(settings),
    )
    app.state.settings = settings
    if session_factory is not None:
        app.state.session_factory = session_factory

    # --- CORS ---
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

    # --- Audit middleware ---
    app.add_middleware(AuditMiddleware)

    # --- Global exception handlers ---
    register_exception_handlers(app)

    # --- Search API ---
    app.include_router(records_router)
    app.include_router(buyers_router)

    # --- Health check ---
    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health():
        return HealthResponse(app=settings.app_name, env=settings.app_env)

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    uvicorn.run(
        "procurement_search.main:app",
        host="0.0.0.0",
        port=default_settings.app_port,
        reload=default_settings.app_env == "development",
    )


app = create_app()
