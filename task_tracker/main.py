"""
Application entry point for the Task Tracker
Builds the FastAPI app: routes, templates, static files, request logging and error handling
"""
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from .api.routes import pages_router, reference_router, tasks_router
from .bootstrap import create_reference_service, create_task_store
from .config import PACKAGE_DIR, Settings, get_settings
from .services.reference_service import ReferenceService
from .services.task_store import TaskStore
from .utils.logging import log_error, setup_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    task_store: Optional[TaskStore] = None,
    reference_service: Optional[ReferenceService] = None,
) -> FastAPI:
    """
    Create the FastAPI application.

    The task store is loaded when the app starts (lifespan), so a corrupt
    backing store stops startup instead of serving unknown data.

    Args:
        settings: Settings to use (defaults to the environment)
        task_store: Pre-built store, used as-is and not reloaded
        reference_service: Pre-built users/categories service

    Returns:
        Configured FastAPI instance
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if task_store is None:
            app.state.task_store = create_task_store(settings)
        else:
            app.state.task_store = task_store
        if reference_service is None:
            app.state.reference_service = create_reference_service(settings)
        else:
            app.state.reference_service = reference_service
        logger.info("%s started with %d tasks", settings.app_name, app.state.task_store.count_tasks())
        yield
        logger.info("%s stopped", settings.app_name)

    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.state.settings = settings
    app.state.templates = Jinja2Templates(directory=str(PACKAGE_DIR / "templates"))

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        log_error(exc, f"{request.method} {request.url.path}")
        return PlainTextResponse(
            "Something went wrong! Please try again later.",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    app.mount("/static", StaticFiles(directory=str(PACKAGE_DIR / "static")), name="static")
    app.include_router(tasks_router, prefix="/api", tags=["tasks"])
    app.include_router(reference_router, prefix="/api", tags=["reference"])
    app.include_router(pages_router, tags=["pages"])

    return app


def run() -> None:
    """Start the HTTP server (console script: task-tracker)."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_dir)
    logger.info("Server running on http://%s:%d", settings.host, settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
