"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from wellness_log.api.routes import router
from wellness_log.app_logging import configure_logging
from wellness_log.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info("Wellness log API starting (%s)", container.settings.environment)
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Wellness Log", lifespan=lifespan)
    app.state.container = container
    app.include_router(router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
