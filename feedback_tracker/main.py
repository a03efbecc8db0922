"""
Feedback Tracker Application

This module bootstraps the FastAPI application with Clean Architecture.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder

from feedback_tracker.container import Container, create_container
from feedback_tracker.presentation import router, set_container


logger = logging.getLogger(__name__)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Answer malformed request bodies with 400 instead of 422."""
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app(container: Container | None = None) -> FastAPI:
    """
    Application factory function.

    Creates and configures the FastAPI application with all dependencies
    properly wired using the Clean Architecture pattern. Sample feedback is
    seeded on startup, before the first request is served.
    """
    # Create the DI container
    container = container or create_container()
    settings = container.settings

    logging.basicConfig(level=settings.log_level)

    # Set the container for dependency injection
    set_container(container)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if settings.seed_on_startup:
            container.seed_feedback_use_case.execute()
        yield

    # Create FastAPI app
    app = FastAPI(
        title=settings.app_name,
        description="Feedback tracking REST service",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.cors_allowed_origin],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    # Include the API router
    app.include_router(router)

    logger.info(
        f"{settings.app_name} configured (storage: {settings.storage_backend}, "
        f"CORS origin: {settings.cors_allowed_origin})"
    )
    return app


# Create the app instance for uvicorn
app = create_app()
