"""FastAPI application factory."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from starlette.exceptions import HTTPException as StarletteHTTPException

from payroll_admin import __version__
from payroll_admin.api.routes import (
    employees_router,
    health_router,
    preferences_router,
    records_router,
    tasks_router,
    time_entries_router,
)
from payroll_admin.config import Settings, get_settings
from payroll_admin.database import create_session_factory, get_engine
from payroll_admin.errors import DataStoreError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Create the engine on startup unless a session factory was injected."""
    engine = None
    if app.state.session_factory is None:
        engine = get_engine(app.state.settings)
        app.state.session_factory = create_session_factory(engine)
        logger.info("Database engine started for %s", engine.url.render_as_string())
    yield
    if engine is not None:
        await engine.dispose()
        app.state.session_factory = None


def register_error_handlers(app: FastAPI) -> None:
    """Every error response is ``{"error": <message>}``."""

    @app.exception_handler(DataStoreError)
    async def datastore_error_handler(request: Request, exc: DataStoreError) -> JSONResponse:
        logger.error(
            "Datastore error on %s %s: %s (code=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": exc.message},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.warning("Validation error on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=422,
            content={
                "error": "Invalid request data",
                "details": jsonable_encoder(exc.errors()),
            },
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.error(
            "Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": str(exc)},
        )


def create_app(
    settings: Settings | None = None,
    session_factory: async_sessionmaker[AsyncSession] | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()
    app = FastAPI(
        title="Payroll Admin API",
        description="Employees, advances, salary reports and time tracking",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.session_factory = session_factory

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(health_router)
    for router in (
        employees_router,
        time_entries_router,
        tasks_router,
        preferences_router,
        records_router,
    ):
        app.include_router(router, prefix="/api")

    return app


# Default app instance for uvicorn
app = create_app()
