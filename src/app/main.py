import logging
import time
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.app.api.api_v1.api import api_router
from src.app.core.config import settings
from src.app.core.error_handlers import (
    api_exception_handler,
    validation_exception_handler,
    sqlalchemy_exception_handler,
    general_exception_handler,
)
from src.app.core.events import lifespan
from src.app.core.exceptions import ApiError, ServiceUnavailableError
from src.app.db.session import AsyncSessionLocal
from src.app.jsonapi.documents import JsonApiResponse

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create FastAPI application."""
    app = FastAPI(
        lifespan=lifespan,
        title=settings.PROJECT_NAME,
        openapi_url=f"{settings.API_V1_STR}/openapi.json",
        default_response_class=JsonApiResponse,
    )

    # Health check endpoint
    @app.get("/healthz")
    async def health_check():
        """Health check endpoint for container orchestration."""
        try:
            async with AsyncSessionLocal() as session:
                await session.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.error(f"Health check failed: {e}")
            raise ServiceUnavailableError("Service unhealthy") from e

        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "service": settings.PROJECT_NAME
        }

    @app.middleware("http")
    async def log_request_middleware(request: Request, call_next):
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({process_time:.4f}s)")
        return response

    # Add exception handlers
    app.add_exception_handler(ApiError, api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    logger.info("CORS Origins from settings: %s", settings.BACKEND_CORS_ORIGINS)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Include the routers
    app.include_router(api_router, prefix=settings.API_V1_STR)

    return app


app = create_app()

if __name__ == "__main__":
    host = "localhost"
    port = settings.SERVER_PORT
    uvicorn.run(app, host=host, port=port)
