"""
Interview Repository Implementation

SQLAlchemy implementation of IInterviewRepository and IReminderStore.
"""

import logging
from datetime import UTC, date, datetime, timedelta, tzinfo
from typing import Any, Sequence

from sqlalchemy import delete, false, func, or_, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.interviews.domain.entities.interview import Interview
from app.domains.interviews.domain.exceptions import CandidateFetchError, StoreError
from app.domains.interviews.domain.value_objects.interview_field import InterviewField
from app.domains.interviews.domain.value_objects.reminder_bucket import ReminderBucket, max_horizon_hours

from .models import BUCKET_FLAG_COLUMNS, InterviewModel

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 200


def flag_column_for(bucket_name: str) -> str:
    """Name of the flag column backing a bucket.

    Raises:
        ValueError: For a bucket with no flag column.
    """
    try:
        return BUCKET_FLAG_COLUMNS[bucket_name]
    except KeyError:
        raise ValueError(
            f"Unknown reminder bucket '{bucket_name}'. Known buckets: {sorted(BUCKET_FLAG_COLUMNS)}"
        ) from None


class SQLAlchemyInterviewRepository:
    """
    SQLAlchemy implementation of the interview repository.

    Serves both the command path (CRUD) and the reminder sweep
    (candidate fetch, conditional mark-sent). Writes are committed
    immediately so each mark stands on its own.
    """

    def __init__(
        self,
        session: AsyncSession,
        buckets: Sequence[ReminderBucket],
        tz: tzinfo,
        page_size: int = DEFAULT_PAGE_SIZE,
    ):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
            buckets: Configured reminder buckets (each must map to a flag column)
            tz: Zone interview dates are stored in
            page_size: Rows per page when fetching sweep candidates

        Raises:
            ValueError: If a bucket has no flag column or page_size < 1.
        """
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.session = session
        self._buckets = tuple(buckets)
        self._flag_columns = {bucket.name: flag_column_for(bucket.name) for bucket in self._buckets}
        self._tz = tz
        self._page_size = page_size

    # Sweep operations

    async def fetch_candidates(self, reference: datetime) -> list[Interview]:
        """Fetch interviews with an unsent flag dated inside the reminder horizon.

        Pages through the window by id until it is exhausted.
        """
        if not self._flag_columns:
            return []

        local_reference = reference.astimezone(self._tz)
        first_date = local_reference.date()
        last_date = (local_reference + timedelta(hours=max_horizon_hours(self._buckets))).date()
        unsent = or_(*(getattr(InterviewModel, column) == false() for column in self._flag_columns.values()))

        candidates: list[Interview] = []
        last_id = 0
        try:
            while True:
                stmt = (
                    select(InterviewModel)
                    .where(
                        InterviewModel.id > last_id,
                        InterviewModel.interview_date >= first_date,
                        InterviewModel.interview_date <= last_date,
                        unsent,
                    )
                    .order_by(InterviewModel.id)
                    .limit(self._page_size)
                )
                result = await self.session.execute(stmt)
                page = list(result.scalars().all())
                candidates.extend(self._to_entity(model) for model in page)

                if len(page) < self._page_size:
                    break
                last_id = page[-1].id

        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Error fetching reminder candidates: {e}")
            raise CandidateFetchError("Failed to fetch reminder candidates", e) from e

        logger.debug(f"Fetched {len(candidates)} reminder candidates between {first_date} and {last_date}")
        return candidates

    async def mark_bucket_sent(self, interview_id: int, bucket_name: str) -> bool:
        """Conditionally set a bucket flag: ``SET flag = true WHERE flag = false``."""
        column_name = flag_column_for(bucket_name)
        column = getattr(InterviewModel, column_name)

        try:
            result = await self.session.execute(
                update(InterviewModel)
                .where(InterviewModel.id == interview_id, column == false())
                .values({column_name: True, "updated_at": datetime.now(UTC)})
            )
            await self.session.commit()
            if result.rowcount:
                return True

            # Nothing updated: either already sent or the row is gone
            current = await self.session.execute(select(column).where(InterviewModel.id == interview_id))
            flag = current.scalar_one_or_none()
            return bool(flag)

        except (SQLAlchemyError, OSError) as e:
            await self.session.rollback()
            logger.error(f"Error marking {bucket_name} sent for interview {interview_id}: {e}")
            raise StoreError(f"Failed to mark {bucket_name} reminder sent for interview {interview_id}", e) from e

    # CRUD operations

    async def create(self, interview: Interview) -> Interview:
        """Insert a new interview."""
        model = self._to_model(interview)
        try:
            self.session.add(model)
            await self.session.commit()
            await self.session.refresh(model)
        except (SQLAlchemyError, OSError) as e:
            await self.session.rollback()
            logger.error(f"Error creating interview for {interview.user_id}: {e}")
            raise StoreError("Failed to create interview", e) from e
        return self._to_entity(model)

    async def get_by_id(self, interview_id: int) -> Interview | None:
        """Find interview by ID."""
        result = await self.session.execute(select(InterviewModel).where(InterviewModel.id == interview_id))
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def list_upcoming_for_user(self, user_id: str, from_date: date) -> list[Interview]:
        result = await self.session.execute(
            select(InterviewModel)
            .where(InterviewModel.user_id == user_id, InterviewModel.interview_date >= from_date)
            .order_by(InterviewModel.interview_date, InterviewModel.interview_time, InterviewModel.id)
        )
        return [self._to_entity(model) for model in result.scalars().all()]

    async def update_fields(
        self,
        interview_id: int,
        user_id: str,
        changes: dict[InterviewField, Any],
    ) -> Interview | None:
        """Apply field changes to an interview owned by ``user_id``."""
        result = await self.session.execute(
            select(InterviewModel).where(InterviewModel.id == interview_id, InterviewModel.user_id == user_id)
        )
        model = result.scalar_one_or_none()
        if model is None:
            return None

        for interview_field, value in changes.items():
            setattr(model, interview_field.column_name, value)

        try:
            await self.session.commit()
            await self.session.refresh(model)
        except (SQLAlchemyError, OSError) as e:
            await self.session.rollback()
            logger.error(f"Error updating interview {interview_id}: {e}")
            raise StoreError(f"Failed to update interview {interview_id}", e) from e
        return self._to_entity(model)

    async def delete(self, interview_id: int, user_id: str) -> bool:
        """Delete an interview owned by ``user_id``."""
        try:
            result = await self.session.execute(
                delete(InterviewModel).where(InterviewModel.id == interview_id, InterviewModel.user_id == user_id)
            )
            await self.session.commit()
        except (SQLAlchemyError, OSError) as e:
            await self.session.rollback()
            logger.error(f"Error deleting interview {interview_id}: {e}")
            raise StoreError(f"Failed to delete interview {interview_id}", e) from e
        return bool(result.rowcount)

    async def reminder_stats(self, from_date: date) -> dict[str, Any]:
        """Count upcoming interviews and sent flags per bucket."""
        columns = [
            func.count(InterviewModel.id),
            *(
                func.count(InterviewModel.id).filter(getattr(InterviewModel, column).is_(True))
                for column in self._flag_columns.values()
            ),
        ]
        try:
            result = await self.session.execute(select(*columns).where(InterviewModel.interview_date >= from_date))
            row = result.one()
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Error computing reminder stats: {e}")
            raise StoreError("Failed to compute reminder stats", e) from e

        upcoming = int(row[0] or 0)
        buckets: dict[str, dict[str, int]] = {}
        for index, name in enumerate(self._flag_columns, start=1):
            sent = int(row[index] or 0)
            buckets[name] = {"pending": upcoming - sent, "sent": sent}
        return {"upcoming": upcoming, "buckets": buckets}

    # Mapping methods

    def _to_entity(self, model: InterviewModel) -> Interview:
        """Convert model to domain entity."""
        return Interview(
            id=model.id,
            user_id=model.user_id,
            interview_date=model.interview_date,
            interview_time=model.interview_time,
            description=model.description or "",
            reminders_sent={name: bool(getattr(model, column)) for name, column in BUCKET_FLAG_COLUMNS.items()},
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, interview: Interview) -> InterviewModel:
        """Convert domain entity to a new model."""
        flags = {
            column: interview.is_bucket_sent(name) for name, column in BUCKET_FLAG_COLUMNS.items()
        }
        return InterviewModel(
            user_id=interview.user_id,
            interview_date=interview.interview_date,
            interview_time=interview.interview_time,
            description=interview.description,
            **flags,
        )
