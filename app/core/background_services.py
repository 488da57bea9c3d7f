"""
Background services management for the application.

This module follows SRP by handling only background task orchestration.
"""

import logging
from typing import Any

from app.config.settings import get_settings
from app.core.container import get_container

logger = logging.getLogger(__name__)


class BackgroundServiceManager:
    """
    Manages background services lifecycle.

    Today that is the in-process reminder scheduler, started only when
    REMINDER_SCHEDULER_ENABLED is set.
    """

    def __init__(self) -> None:
        """Initialize background service manager."""
        self._reminder_scheduler: Any = None
        self._running = False

    @property
    def is_running(self) -> bool:
        """Check if background services are running."""
        return self._running

    async def start(self) -> None:
        """Start all background services."""
        if self._running:
            logger.warning("Background services already running")
            return

        logger.info("Starting background services...")

        if get_settings().REMINDER_SCHEDULER_ENABLED:
            await self._start_reminder_scheduler()
        else:
            logger.info("Reminder scheduler disabled, sweeps must be triggered over HTTP")

        self._running = True
        logger.info("Background services started")

    async def stop(self) -> None:
        """Stop all background services gracefully."""
        if not self._running:
            logger.warning("Background services not running")
            return

        logger.info("Stopping background services...")

        if self._reminder_scheduler:
            await self._stop_reminder_scheduler()

        self._running = False
        logger.info("Background services stopped")

    async def _start_reminder_scheduler(self) -> None:
        """Start the periodic reminder sweep."""
        try:
            self._reminder_scheduler = get_container().interviews.get_reminder_scheduler()
            await self._reminder_scheduler.start()
            logger.info(f"Reminder scheduler jobs: {self._reminder_scheduler.get_jobs_info()}")
        except Exception as e:
            logger.error(f"Failed to start reminder scheduler: {e}", exc_info=True)
            self._reminder_scheduler = None

    async def _stop_reminder_scheduler(self) -> None:
        """Stop the periodic reminder sweep."""
        try:
            await self._reminder_scheduler.stop()
        except Exception as e:
            logger.error(f"Error stopping reminder scheduler: {e}", exc_info=True)
        finally:
            self._reminder_scheduler = None

    def get_status(self) -> dict[str, Any]:
        """
        Get status of background services.

        Returns:
            Dictionary with service status information.
        """
        return {
            "running": self._running,
            "reminder_scheduler_running": bool(self._reminder_scheduler and self._reminder_scheduler.is_running),
        }
