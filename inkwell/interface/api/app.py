"""FastAPI application."""

from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI

from inkwell.config import Settings
from inkwell.interface.api.errors import register_error_handlers
from inkwell.interface.api.routes import auth, health, pages, posts, users
from inkwell.util.di.container import create_container, setup_di
from inkwell.util.observability import instrument_fastapi


def create_app(
    container: AsyncContainer | None = None, settings: Settings | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, configure in conftest.py.

    Args:
        container: DI container (defaults to the production container)
        settings: Settings used by the error handlers (defaults to the
            environment)
    """
    settings = settings or Settings()
    container = container or create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        # Disposes the engine and any other APP-scoped resources
        await container.close()

    app_instance = FastAPI(
        title="Inkwell",
        description="Server-rendered blogging application",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    # Setup dependency injection
    setup_di(app_instance, container)

    register_error_handlers(app_instance, settings)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(pages.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(users.router)
    app_instance.include_router(posts.router)

    return app_instance
