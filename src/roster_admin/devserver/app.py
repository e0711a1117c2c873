"""
roster_admin.devserver.app

FastAPI app factory for the dev stub backend.

Responsibilities:
- Build the FastAPI application and register routers/middleware.
- Open, seed and dispose the local employee store for the app's lifetime.
- Render directory failures as `{message}` bodies with the contract's status codes.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST

from roster_admin import __version__
from roster_admin.devserver.routers.auth import router as auth_router
from roster_admin.devserver.routers.employees import router as employees_router
from roster_admin.devserver.routers.health import router as health_router
from roster_admin.directory.errors import DirectoryError
from roster_admin.directory.local import LocalEmployeeDirectory
from roster_admin.observability.logging import configure_logging, get_logger
from roster_admin.observability.middleware import RequestContextMiddleware
from roster_admin.settings import Settings

log = get_logger(__name__)


def create_devserver(
    *,
    settings: Settings,
    directory: LocalEmployeeDirectory | None = None,
) -> FastAPI:
    configure_logging(
        service_name=f"{settings.service_name}-devserver",
        level=settings.log_level,
        json_logs=settings.env != "dev",
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store = directory or LocalEmployeeDirectory.from_settings(settings)
        await store.initialize()
        app.state.directory = store
        log.info("devserver_startup", env=settings.env)
        try:
            yield
        finally:
            await store.aclose()
            log.info("devserver_shutdown")

    app = FastAPI(
        title="Roster Admin dev backend",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)
    app.include_router(health_router, tags=["health"])
    app.include_router(auth_router)
    app.include_router(employees_router)

    @app.exception_handler(DirectoryError)
    async def _directory_error(_: Request, exc: DirectoryError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(RequestValidationError)
    async def _validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
        fields = sorted({str(err["loc"][-1]) for err in exc.errors() if err.get("loc")})
        message = "Missing or empty required fields"
        if fields:
            message = f"{message}: {', '.join(fields)}"
        return JSONResponse(status_code=HTTP_400_BAD_REQUEST, content={"message": message})

    return app
