"""
Application lifecycle management using modern FastAPI lifespan pattern.

This module follows SRP by handling only application startup/shutdown logic.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config.settings import get_settings
from app.core.background_services import BackgroundServiceManager
from app.database.async_db import dispose_async_engine

logger = logging.getLogger(__name__)


class LifecycleManager:
    """
    Manages application lifecycle events.

    Handles startup initialization and graceful shutdown.
    """

    def __init__(self) -> None:
        """Initialize lifecycle manager."""
        self._background_service_manager = BackgroundServiceManager()
        self._initialized = False

    @property
    def background_services(self) -> BackgroundServiceManager:
        return self._background_service_manager

    async def startup(self) -> None:
        """
        Execute startup tasks.

        Called when the application starts.
        """
        if self._initialized:
            logger.warning("Lifecycle already initialized, skipping startup")
            return

        logger.info("Starting application lifecycle...")

        self._verify_configurations()

        await self._background_service_manager.start()

        self._initialized = True
        logger.info("Application lifecycle startup completed")

    async def shutdown(self) -> None:
        """
        Execute shutdown tasks.

        Called when the application stops.
        """
        if not self._initialized:
            logger.warning("Lifecycle not initialized, skipping shutdown")
            return

        logger.info("Stopping application lifecycle...")

        await self._background_service_manager.stop()
        await dispose_async_engine()

        self._initialized = False
        logger.info("Application lifecycle shutdown completed")

    def _verify_configurations(self) -> None:
        """Verify critical application configurations."""
        settings = get_settings()

        if not settings.AUTHORIZED_USERS:
            logger.warning("AUTHORIZED_USERS is empty - every LINE command will be rejected")

        if not settings.CRON_API_KEY:
            logger.warning("CRON_API_KEY not configured - reminder endpoints are open")

        if settings.REMINDER_RECIPIENT_ID:
            logger.info("Reminders go to the fixed REMINDER_RECIPIENT_ID")
        else:
            logger.info("Reminders go to each interview owner")

        logger.info(f"Time zone: {settings.TIME_ZONE}")


# Global lifecycle manager instance
_lifecycle_manager: LifecycleManager | None = None


def get_lifecycle_manager() -> LifecycleManager:
    """Get or create the global lifecycle manager instance."""
    global _lifecycle_manager
    if _lifecycle_manager is None:
        _lifecycle_manager = LifecycleManager()
    return _lifecycle_manager


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Usage:
        app = FastAPI(lifespan=lifespan)
    """
    lifecycle = get_lifecycle_manager()

    await lifecycle.startup()

    yield

    await lifecycle.shutdown()
