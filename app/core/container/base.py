# ============================================================================
# SCOPE: GLOBAL
# Description: Base container with shared singletons (settings, time zone,
#              reminder buckets, LINE client).
# ============================================================================
"""
Base Container - Shared Singletons.

Single Responsibility: Build and cache resources shared by every request.
"""

import logging
from datetime import tzinfo

import pytz

from app.config.settings import Settings, get_settings
from app.domains.interviews.domain.value_objects.reminder_bucket import ReminderBucket, buckets_from_config
from app.domains.interviews.infrastructure.messaging.line_client import LineMessagingClient

logger = logging.getLogger(__name__)


class BaseContainer:
    """
    Base container for shared singletons.

    Single Responsibility: Create and cache shared resources.
    """

    def __init__(self, settings: Settings | None = None):
        """
        Initialize base container.

        Args:
            settings: Optional settings (defaults to the cached instance)
        """
        self.settings = settings or get_settings()

        self._tz: tzinfo | None = None
        self._buckets: tuple[ReminderBucket, ...] | None = None
        self._line_client: LineMessagingClient | None = None

        logger.info("BaseContainer initialized")

    def get_time_zone(self) -> tzinfo:
        """Configured zone for every interview date/time."""
        if self._tz is None:
            self._tz = pytz.timezone(self.settings.TIME_ZONE)
        return self._tz

    def get_reminder_buckets(self) -> tuple[ReminderBucket, ...]:
        """Ordered reminder buckets from REMINDER_BUCKETS."""
        if self._buckets is None:
            self._buckets = buckets_from_config(self.settings.REMINDER_BUCKETS)
            logger.info(f"Reminder buckets: {[bucket.name for bucket in self._buckets]}")
        return self._buckets

    def get_line_client(self) -> LineMessagingClient:
        """LINE Messaging API client (singleton)."""
        if self._line_client is None:
            self._line_client = LineMessagingClient(
                access_token=self.settings.LINE_CHANNEL_ACCESS_TOKEN,
                base_url=self.settings.LINE_API_BASE,
                timeout=self.settings.LINE_API_TIMEOUT,
            )
        return self._line_client
