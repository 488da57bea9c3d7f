# ============================================================================
# SCOPE: APPLICATION LAYER (Interviews)
# Description: Use cases behind the LINE commands and the stats endpoint.
# ============================================================================
"""Interview Management Use Cases.

Create, list, update and delete interviews, and report reminder counters.
"""

import logging
from datetime import date, datetime, time, tzinfo
from typing import TYPE_CHECKING, Any, Sequence

from app.core.domain.exceptions import EntityNotFoundException, ValidationException

from ...domain.entities.interview import Interview
from ...domain.services.due_window_evaluator import unreachable_buckets
from ...domain.value_objects.interview_field import InterviewField
from ..dto.interview_dtos import (
    BucketStats,
    CreateInterviewRequest,
    DeleteInterviewRequest,
    ReminderStats,
    UpdateInterviewRequest,
)

if TYPE_CHECKING:
    from ...domain.value_objects.reminder_bucket import ReminderBucket
    from ..ports import IInterviewRepository

logger = logging.getLogger(__name__)


def _ensure_future(target: datetime, reference: datetime) -> None:
    if target <= reference:
        raise ValidationException("Interview date and time must be in the future", field="interview_time")


class CreateInterviewUseCase:
    """Schedule a new interview.

    Buckets whose window has already passed at creation time are stored as
    sent so they never fire late.
    """

    def __init__(
        self,
        repository: "IInterviewRepository",
        buckets: Sequence["ReminderBucket"],
        tz: tzinfo,
    ) -> None:
        self._repository = repository
        self._buckets = tuple(buckets)
        self._tz = tz

    async def execute(self, request: CreateInterviewRequest, reference: datetime | None = None) -> Interview:
        """
        Raises:
            ValidationException: If the description is empty or the time is not in the future.
        """
        reference = reference or datetime.now(self._tz)
        description = request.description.strip()
        if not description:
            raise ValidationException("Interview description is required", field="description")

        interview = Interview.create(
            user_id=request.user_id,
            interview_date=request.interview_date,
            interview_time=request.interview_time,
            description=description,
        )
        target = interview.target_instant(self._tz)
        _ensure_future(target, reference)

        for bucket_name in unreachable_buckets(target, reference, self._buckets):
            interview.mark_bucket_sent(bucket_name)

        saved = await self._repository.create(interview)
        logger.info(
            f"Interview {saved.id} created for {request.user_id} at {target.isoformat()} "
            f"(pre-marked: {sorted(k for k, v in saved.reminders_sent.items() if v)})"
        )
        return saved


class ListInterviewsUseCase:
    """List a user's interviews dated today or later."""

    def __init__(self, repository: "IInterviewRepository", tz: tzinfo) -> None:
        self._repository = repository
        self._tz = tz

    async def execute(self, user_id: str, today: date | None = None) -> list[Interview]:
        today = today or datetime.now(self._tz).date()
        return await self._repository.list_upcoming_for_user(user_id, today)


class DeleteInterviewUseCase:
    """Delete an interview owned by the caller."""

    def __init__(self, repository: "IInterviewRepository") -> None:
        self._repository = repository

    async def execute(self, request: DeleteInterviewRequest) -> None:
        """
        Raises:
            EntityNotFoundException: If the interview does not exist or belongs to someone else.
        """
        deleted = await self._repository.delete(request.interview_id, request.user_id)
        if not deleted:
            raise EntityNotFoundException("Interview", request.interview_id)
        logger.info(f"Interview {request.interview_id} deleted by {request.user_id}")


class UpdateInterviewUseCase:
    """Change date, time and/or description of an owned interview.

    Sent flags are never reset. When the interview moves closer, buckets whose
    window has already passed are marked sent.
    """

    def __init__(
        self,
        repository: "IInterviewRepository",
        buckets: Sequence["ReminderBucket"],
        tz: tzinfo,
    ) -> None:
        self._repository = repository
        self._buckets = tuple(buckets)
        self._tz = tz

    def _validate_changes(self, changes: dict[InterviewField, Any]) -> dict[InterviewField, Any]:
        if not changes:
            raise ValidationException("Nothing to update")

        validated: dict[InterviewField, Any] = {}
        for interview_field, value in changes.items():
            if not isinstance(interview_field, InterviewField):
                raise ValidationException(f"Unsupported field: {interview_field}")
            if interview_field is InterviewField.DATE and not isinstance(value, date):
                raise ValidationException("Invalid interview date", field="interview_date")
            if interview_field is InterviewField.TIME and not isinstance(value, time):
                raise ValidationException("Invalid interview time", field="interview_time")
            if interview_field is InterviewField.DESCRIPTION:
                value = str(value).strip()
                if not value:
                    raise ValidationException("Interview description is required", field="description")
            validated[interview_field] = value
        return validated

    async def execute(self, request: UpdateInterviewRequest, reference: datetime | None = None) -> Interview:
        """
        Raises:
            ValidationException: On empty/invalid changes or a new time in the past.
            EntityNotFoundException: If the interview does not exist or belongs to someone else.
        """
        reference = reference or datetime.now(self._tz)
        changes = self._validate_changes(dict(request.changes))

        current = await self._repository.get_by_id(request.interview_id)
        if current is None or not current.is_owned_by(request.user_id):
            raise EntityNotFoundException("Interview", request.interview_id)

        preview = Interview(
            id=current.id,
            user_id=current.user_id,
            interview_date=changes.get(InterviewField.DATE, current.interview_date),
            interview_time=changes.get(InterviewField.TIME, current.interview_time),
            description=changes.get(InterviewField.DESCRIPTION, current.description),
            reminders_sent=dict(current.reminders_sent),
        )
        schedule_changed = any(f.changes_schedule() for f in changes)
        target = preview.target_instant(self._tz)
        if schedule_changed:
            _ensure_future(target, reference)

        updated = await self._repository.update_fields(request.interview_id, request.user_id, changes)
        if updated is None:
            raise EntityNotFoundException("Interview", request.interview_id)

        if schedule_changed:
            for bucket_name in unreachable_buckets(target, reference, self._buckets):
                if updated.is_bucket_sent(bucket_name):
                    continue
                if await self._repository.mark_bucket_sent(request.interview_id, bucket_name):
                    updated.mark_bucket_sent(bucket_name)

        logger.info(f"Interview {request.interview_id} updated by {request.user_id}: {[f.value for f in changes]}")
        return updated


class GetReminderStatsUseCase:
    """Reminder counters over interviews dated today or later."""

    def __init__(self, repository: "IInterviewRepository", buckets: Sequence["ReminderBucket"], tz: tzinfo) -> None:
        self._repository = repository
        self._buckets = tuple(buckets)
        self._tz = tz

    async def execute(self, today: date | None = None) -> ReminderStats:
        today = today or datetime.now(self._tz).date()
        raw = await self._repository.reminder_stats(today)
        bucket_counts = raw.get("buckets", {})
        return ReminderStats(
            upcoming_interviews=int(raw.get("upcoming", 0)),
            buckets=[
                BucketStats(
                    name=bucket.name,
                    pending=int(bucket_counts.get(bucket.name, {}).get("pending", 0)),
                    sent=int(bucket_counts.get(bucket.name, {}).get("sent", 0)),
                )
                for bucket in self._buckets
            ],
        )
