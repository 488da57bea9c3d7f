"""Reminder Sweep Scheduler.

APScheduler-based async scheduler that runs one reminder sweep every N
minutes inside the API process. Meant for development; production
triggers the sweep over HTTP from an external cron.
"""

import logging
from typing import Any, Awaitable, Callable

from apscheduler.schedulers.asyncio import AsyncIOScheduler  # type: ignore[import-not-found]
from apscheduler.triggers.interval import IntervalTrigger  # type: ignore[import-not-found]
from pytz import timezone

from app.domains.interviews.application.dto.sweep_dtos import SweepResult
from app.domains.interviews.domain.exceptions import CandidateFetchError

logger = logging.getLogger(__name__)

SweepRunner = Callable[[], Awaitable[SweepResult]]

JOB_ID = "reminder_sweep"


class ReminderScheduler:
    """Periodic trigger for the reminder sweep.

    The job is registered with ``max_instances=1`` and ``coalesce=True`` so
    two sweeps never overlap and missed ticks collapse into one run.
    """

    def __init__(
        self,
        sweep_runner: SweepRunner,
        interval_minutes: int = 10,
        timezone_name: str = "Asia/Taipei",
        enabled: bool = True,
    ):
        """Initialize scheduler.

        Args:
            sweep_runner: Coroutine factory running exactly one sweep.
            interval_minutes: Minutes between sweeps.
            timezone_name: Timezone for the scheduler clock.
            enabled: Whether scheduler is enabled.
        """
        self._sweep_runner = sweep_runner
        self.interval_minutes = interval_minutes
        self.tz = timezone(timezone_name)
        self.enabled = enabled

        self._scheduler: AsyncIOScheduler | None = None
        self._is_running = False

    async def start(self) -> None:
        """Start the scheduler."""
        if not self.enabled:
            logger.info("ReminderScheduler is disabled, skipping start")
            return

        if self._is_running:
            logger.warning("ReminderScheduler already running")
            return

        scheduler = AsyncIOScheduler(timezone=self.tz)
        self._scheduler = scheduler

        scheduler.add_job(
            self.run_once,
            IntervalTrigger(minutes=self.interval_minutes, timezone=self.tz),
            id=JOB_ID,
            replace_existing=True,
            name="Interview Reminder Sweep",
            max_instances=1,
            coalesce=True,
        )

        scheduler.start()
        self._is_running = True
        logger.info(f"ReminderScheduler started with timezone {self.tz} (every {self.interval_minutes} min)")

    async def stop(self) -> None:
        """Stop the scheduler gracefully."""
        if self._scheduler and self._is_running:
            self._scheduler.shutdown(wait=False)
            self._is_running = False
            logger.info("ReminderScheduler stopped")

    async def run_once(self) -> SweepResult | None:
        """Run one sweep. Errors are logged so the job keeps its schedule."""
        logger.info("Starting scheduled reminder sweep")
        try:
            result = await self._sweep_runner()
        except CandidateFetchError as e:
            logger.error(f"Scheduled reminder sweep aborted: {e.message}")
            return None
        except Exception as e:
            logger.error(f"Error running scheduled reminder sweep: {e}", exc_info=True)
            return None

        logger.info(
            f"Scheduled reminder sweep done: {result.reminders_sent} sent, "
            f"{result.failed_count} failed, {result.total_processed} candidates"
        )
        return result

    @property
    def is_running(self) -> bool:
        """Check if scheduler is running."""
        return self._is_running

    def get_jobs_info(self) -> list[dict[str, Any]]:
        """Get information about scheduled jobs."""
        if not self._scheduler:
            return []

        jobs = []
        for job in self._scheduler.get_jobs():
            jobs.append(
                {
                    "id": job.id,
                    "name": job.name,
                    "next_run": job.next_run_time.isoformat() if job.next_run_time else None,
                }
            )
        return jobs
