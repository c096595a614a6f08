"""Translation of catalog errors into HTTP responses."""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from filmapi.services.exceptions import EntityNotFoundError, EntityValidationError
from filmapi.utils.logger import setup_logger

logger = setup_logger("api.errors")


async def entity_not_found_handler(_request: Request, exc: EntityNotFoundError) -> JSONResponse:
    """Map EntityNotFoundError to 404."""
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)})


async def entity_validation_handler(_request: Request, exc: EntityValidationError) -> JSONResponse:
    """Map EntityValidationError to 400."""
    logger.warning("Validation failed: %s", exc.reason)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.reason})


def register_exception_handlers(app: FastAPI) -> None:
    """Register catalog error handlers.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(EntityNotFoundError, entity_not_found_handler)
    app.add_exception_handler(EntityValidationError, entity_validation_handler)
