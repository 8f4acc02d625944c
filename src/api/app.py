"""
FastAPI application factory for the task broker
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from task_queue import QueueRegistry

from .routers import router
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)

INVALID_REQUEST_BODY = "Invalid request body"


async def invalid_request_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report malformed payloads as 400 instead of FastAPI's 422"""
    logger.warning(f"Invalid request to {request.url.path}: {exc.errors()}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": INVALID_REQUEST_BODY},
    )


def create_app(registry: Optional[QueueRegistry] = None, settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the broker app around an explicit queue registry

    Args:
        registry: Registry shared by every request; a fresh one is created if omitted
        settings: Service settings; read from the environment if omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting queue service on {settings.HOST}:{settings.PORT}...")
        try:
            yield
        finally:
            logger.info(f"Stopping queue service ({len(app.state.registry)} queues in memory)")

    app = FastAPI(title="Task Broker", lifespan=lifespan)
    app.state.registry = registry if registry is not None else QueueRegistry()
    app.state.settings = settings
    app.add_exception_handler(RequestValidationError, invalid_request_handler)
    app.include_router(router)
    return app
