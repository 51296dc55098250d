"""Main FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import Depends, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from geothing.core.errors import DomainError, InternalError, StorageError, http_status_for
from geothing.core.logging import configure_logging
from geothing.core.middleware import get_request_id, request_context_middleware
from geothing.core.settings import get_settings
from geothing.db.postgres.connection import (
    Database,
    close_db_pool,
    get_database,
    get_db_pool,
)
from geothing.features.auth.router import router as auth_router
from geothing.features.auth.router import secured_router as auth_secured_router
from geothing.features.things.router import router as things_router
from geothing.features.type_things.repositories.postgres_repository import (
    PostgresTypeThingRepository,
)
from geothing.features.type_things.router import router as type_things_router

logger = logging.getLogger(__name__)


async def check_type_things_present(db: Database, schema: str) -> int:
    """Refuse to serve when no type thing exists, things could not be created."""
    count = await PostgresTypeThingRepository(db, schema=schema).count_all()
    if count < 1:
        logger.warning("%s.type_thing is empty, it should contain at least one row", schema)
        raise StorageError(f"{schema}.type_thing should not be empty")
    logger.info("database contains %d type things", count)
    return count


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.
    Handles startup and shutdown events.
    """
    settings = get_settings()
    logger.info("starting %s v%s", settings.app_name, settings.app_version)

    pool = await get_db_pool()
    await check_type_things_present(
        Database(pool, command_timeout=settings.db_command_timeout), settings.db_schema
    )

    yield

    logger.info("shutting down application")
    await close_db_pool()
    logger.info("database connection pool closed")


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Translate a DomainError into its HTTP status and a JSON body."""
    status_code = http_status_for(exc)
    detail = exc.detail
    if isinstance(exc, InternalError):
        logger.error(
            "internal error on %s %s: %s",
            request.method,
            request.url.path,
            exc.detail,
            exc_info=exc,
            extra={"request_id": str(get_request_id())},
        )
        detail = InternalError.default_detail
    return JSONResponse(status_code=status_code, content={"code": exc.code, "detail": detail})


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    configure_logging(settings.log_level, json_logs=settings.log_json)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Things and type things with PostGIS positions",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(request_context_middleware)
    app.add_exception_handler(DomainError, domain_error_handler)

    app.include_router(auth_router)
    app.include_router(auth_secured_router, prefix=settings.api_prefix)
    app.include_router(things_router, prefix=settings.api_prefix)
    app.include_router(type_things_router, prefix=settings.api_prefix)

    @app.get("/health")
    async def health_check() -> dict[str, str]:  # pyright: ignore[reportUnusedFunction]
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.get("/readiness")
    async def readiness_check(  # pyright: ignore[reportUnusedFunction]
        db: Database = Depends(get_database),
    ) -> JSONResponse:
        """Ready once the database answers."""
        try:
            await db.fetchval("SELECT 1;")
        except DomainError as e:
            logger.warning("readiness check failed: %s", e)
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "not ready"},
            )
        return JSONResponse(content={"status": "ready"})

    @app.get("/goAppInfo")
    async def app_info() -> dict[str, Any]:  # pyright: ignore[reportUnusedFunction]
        """Name, version and repository of the running application."""
        return {
            "app": settings.app_name,
            "version": settings.app_version,
            "repository": settings.app_repository,
        }

    return app


# Create the app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "geothing.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level="info" if not settings.debug else "debug",
    )
