"""FastAPI application entry point.

Creates and configures the Film API: catalog routers, error
translation, CORS, Prometheus metrics and the health probe.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from filmapi.api.errors import register_exception_handlers
from filmapi.api.routers import characters, franchises, movies
from filmapi.api.schemas import DatabaseComponentHealth, HealthResponse
from filmapi.database.connection import close_database, get_database
from filmapi.monitoring.middleware import PrometheusMiddleware, mount_metrics
from filmapi.settings import settings
from filmapi.utils.logger import setup_logger

logger = setup_logger("api.main")

# =============================================================================
# LIFESPAN
# =============================================================================


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Validates database connection on startup and releases the pool
    on shutdown.

    Args:
        _app: FastAPI application instance.

    Yields:
        None after startup tasks complete.
    """
    _verify_database_connection()
    yield
    close_database()


def _verify_database_connection() -> None:
    """Verify database is accessible on startup.

    Raises:
        RuntimeError: If the database cannot be reached.
    """
    if not get_database().check_connection():
        raise RuntimeError("Database is not reachable")
    logger.info("Database connection verified")


# =============================================================================
# APPLICATION FACTORY
# =============================================================================


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        Configured FastAPI instance.
    """
    app = FastAPI(
        title=settings.api.title,
        version=settings.api.version,
        description="REST API for characters, movies and franchises",
        lifespan=lifespan,
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )
    _configure_cors(app)
    app.add_middleware(PrometheusMiddleware)
    mount_metrics(app)
    register_exception_handlers(app)
    _register_routers(app)
    app.add_api_route(
        "/api/v1/health",
        health_check,
        methods=["GET"],
        response_model=HealthResponse,
        tags=["Health"],
        summary="Health check",
    )
    return app


def _configure_cors(app: FastAPI) -> None:
    """Configure CORS middleware.

    Args:
        app: FastAPI application instance.
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type"],
    )


def _register_routers(app: FastAPI) -> None:
    """Register API routers.

    Args:
        app: FastAPI application instance.
    """
    app.include_router(characters.router, prefix="/api/v1")
    app.include_router(movies.router, prefix="/api/v1")
    app.include_router(franchises.router, prefix="/api/v1")


# =============================================================================
# ROOT ENDPOINTS
# =============================================================================


def health_check() -> HealthResponse:
    """Health check endpoint.

    Returns:
        API health status with database connectivity.
    """
    database = _check_database()
    return HealthResponse(
        status="healthy" if database.connected else "degraded",
        version=settings.api.version,
        database=database,
    )


def _check_database() -> DatabaseComponentHealth:
    """Check database connection status."""
    db = get_database()
    connected = db.check_connection()
    return DatabaseComponentHealth(connected=connected, dialect=db.engine.dialect.name)


app = create_app()


# =============================================================================
# CLI ENTRY POINT
# =============================================================================


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "filmapi.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
    )
