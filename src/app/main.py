import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Callable

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.app.api.error_handlers import register_exception_handlers
from src.app.api.middleware import RequestLoggingMiddleware
from src.app.api.v1 import clients
from src.app.config import get_settings
from src.app.containers import Container
from src.app.logging import configure_logging

# Configure logging at module load time
configure_logging(get_settings().log_level)

logger = logging.getLogger(__name__)

# Type alias for lifespan context manager
LifespanType = Callable[[FastAPI], AsyncIterator[None]]


@asynccontextmanager
async def default_lifespan(app: FastAPI):
    """Default application lifespan manager - creates the schema on startup."""
    container: Container = app.state.container
    logger.info("Starting Client API...")

    db = container.database()
    await db.create_schema()
    logger.info("Database initialized successfully")

    yield

    logger.info("Shutting down Client API...")
    await db.dispose()


def create_app(container: Container, lifespan: LifespanType = default_lifespan) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        container: DI container providing settings, database and services.
        lifespan: Optional lifespan context manager. If not provided, uses default_lifespan.

    Returns:
        Configured FastAPI application.
    """
    container.wire(modules=[
        "src.app.api.v1.clients",
    ])

    config = container.config()

    app = FastAPI(
        title=config.app_name,
        version=config.app_version,
        lifespan=lifespan,
    )

    # Attach container to app state for access in lifespan and routes
    app.state.container = container

    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["Location", RequestLoggingMiddleware.REQUEST_ID_HEADER],
    )
    register_exception_handlers(app)

    # Include routers
    app.include_router(clients.router)

    @app.get("/")
    async def root():
        return {"message": "Welcome to Client API"}

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    return app


container = Container()
app = create_app(container=container)


def run() -> None:
    """Serve the application with uvicorn using the configured host and port."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "src.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
