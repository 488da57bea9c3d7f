# ============================================================================
# SCOPE: DOMAIN
# Description: Container for Interviews domain dependencies.
#              Provides factories for repositories, services and use cases.
# ============================================================================
"""
Interviews Domain Container.

Provides dependency injection for the Interviews domain. Anything touching
the database takes the caller's AsyncSession.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.database.async_db import get_async_db_context
from app.domains.interviews.application.dto.sweep_dtos import SweepResult
from app.domains.interviews.application.services.command_handler import InterviewCommandHandler
from app.domains.interviews.application.services.notification_dispatcher import NotificationDispatcher
from app.domains.interviews.application.use_cases import (
    CreateInterviewUseCase,
    DeleteInterviewUseCase,
    GetReminderStatsUseCase,
    ListInterviewsUseCase,
    RunReminderSweepUseCase,
    UpdateInterviewUseCase,
)
from app.domains.interviews.infrastructure.persistence.sqlalchemy import SQLAlchemyInterviewRepository
from app.domains.interviews.infrastructure.scheduler import ReminderScheduler

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

    from app.core.container.base import BaseContainer

logger = logging.getLogger(__name__)


class InterviewsContainer:
    """Container for Interviews domain dependencies.

    Single Responsibility: Wire interviews dependencies.
    """

    def __init__(self, base: "BaseContainer"):
        """Initialize container.

        Args:
            base: Base container with shared singletons.
        """
        self._base = base
        self._scheduler: ReminderScheduler | None = None

    @property
    def settings(self):
        return self._base.settings

    # Repositories

    def create_interview_repository(self, session: "AsyncSession") -> SQLAlchemyInterviewRepository:
        return SQLAlchemyInterviewRepository(
            session=session,
            buckets=self._base.get_reminder_buckets(),
            tz=self._base.get_time_zone(),
            page_size=self.settings.REMINDER_FETCH_PAGE_SIZE,
        )

    # Services

    def create_notification_dispatcher(self) -> NotificationDispatcher:
        return NotificationDispatcher(
            transport=self._base.get_line_client(),
            fixed_recipient_id=self.settings.REMINDER_RECIPIENT_ID,
        )

    def create_command_handler(self, session: "AsyncSession") -> InterviewCommandHandler:
        repository = self.create_interview_repository(session)
        buckets = self._base.get_reminder_buckets()
        tz = self._base.get_time_zone()
        return InterviewCommandHandler(
            create_interview=CreateInterviewUseCase(repository, buckets, tz),
            list_interviews=ListInterviewsUseCase(repository, tz),
            delete_interview=DeleteInterviewUseCase(repository),
            update_interview=UpdateInterviewUseCase(repository, buckets, tz),
        )

    # Use cases

    def create_run_reminder_sweep_use_case(self, session: "AsyncSession") -> RunReminderSweepUseCase:
        """Create RunReminderSweepUseCase with dependencies."""
        return RunReminderSweepUseCase(
            store=self.create_interview_repository(session),
            dispatcher=self.create_notification_dispatcher(),
            buckets=self._base.get_reminder_buckets(),
            tz=self._base.get_time_zone(),
            send_interval_seconds=self.settings.REMINDER_SEND_INTERVAL_SECONDS,
        )

    def create_get_reminder_stats_use_case(self, session: "AsyncSession") -> GetReminderStatsUseCase:
        return GetReminderStatsUseCase(
            repository=self.create_interview_repository(session),
            buckets=self._base.get_reminder_buckets(),
            tz=self._base.get_time_zone(),
        )

    async def run_reminder_sweep(self) -> SweepResult:
        """Run one sweep in its own database session (scheduler and CLI)."""
        async with get_async_db_context() as session:
            return await self.create_run_reminder_sweep_use_case(session).execute()

    # Scheduler

    def get_reminder_scheduler(self) -> ReminderScheduler:
        """Development scheduler (singleton)."""
        if self._scheduler is None:
            self._scheduler = ReminderScheduler(
                sweep_runner=self.run_reminder_sweep,
                interval_minutes=self.settings.REMINDER_SWEEP_INTERVAL_MINUTES,
                timezone_name=self.settings.TIME_ZONE,
                enabled=self.settings.REMINDER_SCHEDULER_ENABLED,
            )
        return self._scheduler
