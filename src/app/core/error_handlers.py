import logging
from typing import Any, Optional

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError

from src.app.core.exceptions import ApiError
from src.app.jsonapi.documents import JSONAPI_MEDIA_TYPE

logger = logging.getLogger(__name__)


def _error_document(status_code: int, title: str, detail: Any, source: Optional[dict] = None) -> JSONResponse:
    error = {"status": str(status_code), "title": title, "detail": detail}
    if source:
        error["source"] = source
    return JSONResponse(
        status_code=status_code,
        content={"errors": [error]},
        media_type=JSONAPI_MEDIA_TYPE,
    )


async def api_exception_handler(request: Request, exc: ApiError) -> JSONResponse:
    """Handle domain errors raised by repositories and endpoints."""
    logger.warning(f"{exc.title} on {request.method} {request.url.path}: {exc.detail}")
    return _error_document(exc.status_code, exc.title, exc.detail, exc.source)


async def validation_exception_handler(request: Request, exc: ValidationError | RequestValidationError) -> JSONResponse:
    """Handle Pydantic validation errors."""
    logger.error(f"Validation error: {exc.errors()}")
    return JSONResponse(
        status_code=422,
        content={
            "errors": [
                {
                    "status": "422",
                    "title": "Unprocessable Entity",
                    "detail": error.get("msg"),
                    "source": {"pointer": "/" + "/".join(str(loc) for loc in error.get("loc", ()))},
                }
                for error in exc.errors()
            ]
        },
        media_type=JSONAPI_MEDIA_TYPE,
    )


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Handle SQLAlchemy database errors."""
    logger.error(f"Database error: {str(exc)}")
    return _error_document(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error", "Database error occurred"
    )


async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all other exceptions."""
    logger.error(f"Unexpected error: {str(exc)}", exc_info=True)
    return _error_document(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error", "An unexpected error occurred"
    )
