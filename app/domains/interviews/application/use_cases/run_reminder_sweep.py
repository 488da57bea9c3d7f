# ============================================================================
# SCOPE: APPLICATION LAYER (Interviews)
# Description: Use case running one fetch -> evaluate -> dispatch -> mark sweep.
# ============================================================================
"""Run Reminder Sweep Use Case.

Invoked once per external tick (HTTP trigger, CLI or the development
scheduler). Per-reminder failures are collected into the result; only a
failed candidate fetch propagates.
"""

import asyncio
import logging
from datetime import datetime, tzinfo
from typing import TYPE_CHECKING, Sequence

import pytz

from ...domain.exceptions import StoreError
from ...domain.services.due_window_evaluator import evaluate_due_buckets
from ..dto.sweep_dtos import SweepError, SweepResult

if TYPE_CHECKING:
    from ...domain.entities.interview import Interview
    from ...domain.value_objects.reminder_bucket import ReminderBucket
    from ..ports import IReminderStore
    from ..services.notification_dispatcher import NotificationDispatcher

logger = logging.getLogger(__name__)


class RunReminderSweepUseCase:
    """Use case for sending every reminder currently due.

    Pairs are processed sequentially. A bucket is marked sent strictly after
    its own successful dispatch.
    """

    def __init__(
        self,
        store: "IReminderStore",
        dispatcher: "NotificationDispatcher",
        buckets: Sequence["ReminderBucket"],
        tz: tzinfo,
        send_interval_seconds: float = 0.0,
    ) -> None:
        """Initialize use case.

        Args:
            store: Candidate fetch / mark-sent interface (DIP).
            dispatcher: Formats and delivers single reminders.
            buckets: Ordered bucket definitions.
            tz: Zone interview dates and times are read in.
            send_interval_seconds: Pause between consecutive sends.
        """
        self._store = store
        self._dispatcher = dispatcher
        self._buckets = tuple(buckets)
        self._buckets_by_name = {bucket.name: bucket for bucket in self._buckets}
        self._tz = tz
        self._send_interval_seconds = send_interval_seconds

    def _normalize_reference(self, reference: datetime | None) -> datetime:
        if reference is None:
            return datetime.now(self._tz)
        if reference.tzinfo is None:
            if isinstance(self._tz, pytz.BaseTzInfo):
                return self._tz.localize(reference, is_dst=False)
            return reference.replace(tzinfo=self._tz)
        return reference

    def build_worklist(
        self,
        candidates: list["Interview"],
        reference: datetime,
    ) -> list[tuple["Interview", "ReminderBucket"]]:
        """Flatten candidates into due (interview, bucket) pairs."""
        worklist: list[tuple["Interview", "ReminderBucket"]] = []
        for interview in candidates:
            try:
                due = evaluate_due_buckets(interview, reference, self._buckets, self._tz)
            except ValueError as e:
                logger.warning(f"Skipping interview {interview.id}: {e}")
                continue
            worklist.extend((interview, self._buckets_by_name[name]) for name in due)
        return worklist

    async def execute(self, reference: datetime | None = None) -> SweepResult:
        """Execute one sweep.

        Args:
            reference: Sweep instant (defaults to now in the configured zone).
                Naive values are read in the configured zone.

        Returns:
            SweepResult with counts and per-pair errors.

        Raises:
            CandidateFetchError: When candidates cannot be fetched.
        """
        reference = self._normalize_reference(reference)
        logger.info(f"Starting reminder sweep at {reference.isoformat()}")

        candidates = await self._store.fetch_candidates(reference)
        worklist = self.build_worklist(candidates, reference)

        if not worklist:
            logger.info(f"No reminders due ({len(candidates)} candidates checked)")
            return SweepResult(success=True, total_processed=len(candidates))

        sent_count = 0
        errors: list[SweepError] = []

        for index, (interview, bucket) in enumerate(worklist):
            if index and self._send_interval_seconds > 0:
                await asyncio.sleep(self._send_interval_seconds)

            outcome = await self._dispatcher.dispatch(interview, bucket)
            if not outcome.sent:
                reason = outcome.reason or "dispatch failed"
                logger.warning(f"Reminder {bucket.name} for interview {interview.id} not sent: {reason}")
                errors.append(SweepError(interview.id, bucket.name, "dispatch", reason))
                continue

            mark_error = await self._mark_sent(interview, bucket)
            if mark_error:
                # Message already went out; the next sweep may send it again.
                logger.error(
                    f"Reminder {bucket.name} for interview {interview.id} was sent "
                    f"but could not be marked: {mark_error}"
                )
                errors.append(SweepError(interview.id, bucket.name, "mark", mark_error))
                continue

            interview.mark_bucket_sent(bucket.name)
            sent_count += 1

        logger.info(
            f"Reminder sweep completed: {sent_count} sent, {len(errors)} failed, "
            f"{len(worklist)} attempted, {len(candidates)} candidates"
        )

        return SweepResult(
            success=True,
            total_processed=len(candidates),
            attempted=len(worklist),
            reminders_sent=sent_count,
            errors=errors,
        )

    async def _mark_sent(self, interview: "Interview", bucket: "ReminderBucket") -> str | None:
        """Mark a dispatched bucket. Returns an error reason, or None on success."""
        if interview.id is None:
            return "interview has no id"
        try:
            marked = await self._store.mark_bucket_sent(interview.id, bucket.name)
        except StoreError as e:
            return e.message
        if not marked:
            return "interview no longer exists"
        return None
