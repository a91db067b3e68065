"""FastAPI application."""

from contextlib import asynccontextmanager

import logfire
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog.config import API_VERSION, Settings
from blog.domain.service import CategoryService
from blog.interface.api.routes import (
    auth,
    categories,
    feed,
    health,
    posts,
    upload,
)
from blog.util.di.container import create_container, setup_di
from blog.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the content directories for every known category on startup."""
    container = app.state.dishka_container
    category_service = await container.get(CategoryService)
    await category_service.ensure_directories()
    logfire.info("Content directories ready")

    yield

    await container.close()


def create_app() -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it without sending.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Blog API",
        description="Content API for a personal Markdown blog",
        version=API_VERSION,
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "Cache-Control",
            "X-Requested-With",
        ],
        expose_headers=["Content-Length", "Content-Type", "Retry-After"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Settings are loaded from environment automatically
    container = create_container()
    setup_di(app_instance, container)

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(categories.router)
    app_instance.include_router(upload.router)
    app_instance.include_router(feed.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
