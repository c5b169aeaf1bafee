import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from themehooks.config import Settings, settings
from themehooks.exception_handlers import register_exception_handlers
from themehooks.kernel import build_kernel
from themehooks.middleware.logging import StructuredLoggingMiddleware, setup_structured_logging
from themehooks.routes import api, pages

setup_structured_logging(log_level=settings.log_level, json_format=settings.log_json)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("Starting up the application...")
    yield
    logger.info("Shutting down the application...")


def create_app(app_settings: Settings | None = None) -> FastAPI:
    """Create the FastAPI application."""
    app_settings = app_settings or settings
    kernel = build_kernel(app_settings)

    app = FastAPI(
        title=app_settings.app_name,
        description="Class-based and legacy procedural theme hooks",
        debug=app_settings.debug,
        version=app_settings.app_version,
        lifespan=lifespan,
    )
    app.state.kernel = kernel
    app.state.templates = Jinja2Templates(
        directory=[app_settings.templates_dir, *kernel.extensions.template_dirs()],
    )

    app.add_middleware(StructuredLoggingMiddleware)
    register_exception_handlers(app)

    app.mount("/static", StaticFiles(directory=app_settings.static_dir), name="static")
    app.include_router(api.router, prefix="/api/v1")
    app.include_router(pages.build_pages_router(kernel.renderer))

    @app.get("/health", tags=["Root"])
    async def health() -> dict[str, str]:
        return {"status": "ok", "app": app_settings.app_name, "version": app_settings.app_version}

    if app_settings.debug:
        logger.info("Running in %s mode", app_settings.environment)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=settings.debug)
