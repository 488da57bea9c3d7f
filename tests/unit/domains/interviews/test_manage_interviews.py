"""
Unit tests for interview management use cases.

Tests:
- CreateInterviewUseCase (future check, pre-marking unreachable buckets)
- ListInterviewsUseCase
- DeleteInterviewUseCase
- UpdateInterviewUseCase (ownership, flags never reset)
- GetReminderStatsUseCase
"""

from dataclasses import replace
from datetime import date, time
from unittest.mock import AsyncMock

import pytest

from app.core.domain.exceptions import EntityNotFoundException, ValidationException
from app.domains.interviews.application.dto.interview_dtos import (
    CreateInterviewRequest,
    DeleteInterviewRequest,
    UpdateInterviewRequest,
)
from app.domains.interviews.application.use_cases import (
    CreateInterviewUseCase,
    DeleteInterviewUseCase,
    GetReminderStatsUseCase,
    ListInterviewsUseCase,
    RunReminderSweepUseCase,
    UpdateInterviewUseCase,
)
from app.domains.interviews.application.services.notification_dispatcher import NotificationDispatcher
from app.domains.interviews.domain.value_objects.interview_field import InterviewField


def _assign_id(interview_id: int):
    async def _create(interview):
        interview.id = interview_id
        return interview

    return _create


# ============================================================================
# CreateInterviewUseCase Tests
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
class TestCreateInterview:
    @pytest.mark.asyncio
    async def test_far_future_keeps_all_buckets_pending(self, mock_interview_repository, buckets, tz, at):
        # Arrange
        mock_interview_repository.create = AsyncMock(side_effect=_assign_id(10))
        use_case = CreateInterviewUseCase(mock_interview_repository, buckets, tz)
        request = CreateInterviewRequest("U1", date(2024, 1, 20), time(14, 30), "  Google  ")

        # Act
        interview = await use_case.execute(request, reference=at(2024, 1, 15, 10))

        # Assert
        assert interview.id == 10
        assert interview.description == "Google"
        assert not interview.is_bucket_sent("24h")
        assert not interview.is_bucket_sent("3h")

    @pytest.mark.asyncio
    async def test_thirty_minutes_ahead_pre_marks_both_buckets(
        self, mock_interview_repository, mock_reminder_store, mock_transport, buckets, tz, at
    ):
        """A sweep right after creation finds nothing due for the interview."""
        # Arrange
        mock_interview_repository.create = AsyncMock(side_effect=_assign_id(11))
        use_case = CreateInterviewUseCase(mock_interview_repository, buckets, tz)
        created_at = at(2024, 1, 15, 10, 30)

        # Act
        interview = await use_case.execute(
            CreateInterviewRequest("U1", date(2024, 1, 15), time(11, 0), "Quick call"),
            reference=created_at,
        )
        mock_reminder_store.fetch_candidates.return_value = [interview]
        sweep = RunReminderSweepUseCase(mock_reminder_store, NotificationDispatcher(mock_transport), buckets, tz)
        result = await sweep.execute(created_at)

        # Assert
        assert interview.is_bucket_sent("24h")
        assert interview.is_bucket_sent("3h")
        saved = mock_interview_repository.create.await_args.args[0]
        assert saved.reminders_sent == {"24h": True, "3h": True}
        assert result.attempted == 0
        mock_transport.push_text.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_past_time_rejected(self, mock_interview_repository, buckets, tz, at):
        use_case = CreateInterviewUseCase(mock_interview_repository, buckets, tz)

        with pytest.raises(ValidationException, match="future"):
            await use_case.execute(
                CreateInterviewRequest("U1", date(2024, 1, 15), time(9, 0), "Too late"),
                reference=at(2024, 1, 15, 10),
            )

        mock_interview_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_blank_description_rejected(self, mock_interview_repository, buckets, tz, at):
        use_case = CreateInterviewUseCase(mock_interview_repository, buckets, tz)

        with pytest.raises(ValidationException):
            await use_case.execute(
                CreateInterviewRequest("U1", date(2024, 1, 20), time(9, 0), "   "),
                reference=at(2024, 1, 15, 10),
            )


# ============================================================================
# List / Delete Tests
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
class TestListAndDelete:
    @pytest.mark.asyncio
    async def test_list_from_today(self, mock_interview_repository, tz, make_interview):
        mock_interview_repository.list_upcoming_for_user.return_value = [make_interview()]

        interviews = await ListInterviewsUseCase(mock_interview_repository, tz).execute("U1", today=date(2024, 1, 15))

        assert len(interviews) == 1
        mock_interview_repository.list_upcoming_for_user.assert_awaited_once_with("U1", date(2024, 1, 15))

    @pytest.mark.asyncio
    async def test_delete_owned(self, mock_interview_repository):
        await DeleteInterviewUseCase(mock_interview_repository).execute(DeleteInterviewRequest(5, "U1"))

        mock_interview_repository.delete.assert_awaited_once_with(5, "U1")

    @pytest.mark.asyncio
    async def test_delete_missing_or_foreign(self, mock_interview_repository):
        mock_interview_repository.delete.return_value = False

        with pytest.raises(EntityNotFoundException):
            await DeleteInterviewUseCase(mock_interview_repository).execute(DeleteInterviewRequest(5, "U-other"))


# ============================================================================
# UpdateInterviewUseCase Tests
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
class TestUpdateInterview:
    @pytest.mark.asyncio
    async def test_reschedule_keeps_sent_flags(self, mock_interview_repository, buckets, tz, at, make_interview):
        """Moving an interview later never resets a sent flag."""
        # Arrange
        current = make_interview(interview_id=4, user_id="U1", sent=("24h",))
        moved = replace(current, interview_date=date(2024, 1, 25), reminders_sent={"24h": True, "3h": False})
        mock_interview_repository.get_by_id.return_value = current
        mock_interview_repository.update_fields = AsyncMock(return_value=moved)
        use_case = UpdateInterviewUseCase(mock_interview_repository, buckets, tz)

        # Act
        updated = await use_case.execute(
            UpdateInterviewRequest(4, "U1", {InterviewField.DATE: date(2024, 1, 25)}),
            reference=at(2024, 1, 15, 10),
        )

        # Assert
        assert updated.is_bucket_sent("24h")
        assert not updated.is_bucket_sent("3h")
        mock_interview_repository.update_fields.assert_awaited_once_with(
            4, "U1", {InterviewField.DATE: date(2024, 1, 25)}
        )
        mock_interview_repository.mark_bucket_sent.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_moving_closer_marks_unreachable_bucket(
        self, mock_interview_repository, buckets, tz, at, make_interview
    ):
        current = make_interview(interview_id=4, user_id="U1", interview_date=date(2024, 1, 20))
        moved = replace(current, interview_date=date(2024, 1, 15), interview_time=time(20, 0), reminders_sent={})
        mock_interview_repository.get_by_id.return_value = current
        mock_interview_repository.update_fields = AsyncMock(return_value=moved)
        use_case = UpdateInterviewUseCase(mock_interview_repository, buckets, tz)

        updated = await use_case.execute(
            UpdateInterviewRequest(
                4, "U1", {InterviewField.DATE: date(2024, 1, 15), InterviewField.TIME: time(20, 0)}
            ),
            reference=at(2024, 1, 15, 10),
        )

        mock_interview_repository.mark_bucket_sent.assert_awaited_once_with(4, "24h")
        assert updated.is_bucket_sent("24h")
        assert not updated.is_bucket_sent("3h")

    @pytest.mark.asyncio
    async def test_description_only_skips_future_check(
        self, mock_interview_repository, buckets, tz, at, make_interview
    ):
        current = make_interview(interview_id=4, user_id="U1")
        mock_interview_repository.get_by_id.return_value = current
        mock_interview_repository.update_fields = AsyncMock(return_value=replace(current, description="Renamed"))
        use_case = UpdateInterviewUseCase(mock_interview_repository, buckets, tz)

        updated = await use_case.execute(
            UpdateInterviewRequest(4, "U1", {InterviewField.DESCRIPTION: "Renamed"}),
            reference=at(2024, 2, 1, 10),
        )

        assert updated.description == "Renamed"

    @pytest.mark.asyncio
    async def test_foreign_interview_not_found(self, mock_interview_repository, buckets, tz, at, make_interview):
        mock_interview_repository.get_by_id.return_value = make_interview(interview_id=4, user_id="U-owner")
        use_case = UpdateInterviewUseCase(mock_interview_repository, buckets, tz)

        with pytest.raises(EntityNotFoundException):
            await use_case.execute(
                UpdateInterviewRequest(4, "U-intruder", {InterviewField.DESCRIPTION: "mine"}),
                reference=at(2024, 1, 15, 10),
            )

        mock_interview_repository.update_fields.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_past_time_rejected(self, mock_interview_repository, buckets, tz, at, make_interview):
        mock_interview_repository.get_by_id.return_value = make_interview(interview_id=4, user_id="U1")
        use_case = UpdateInterviewUseCase(mock_interview_repository, buckets, tz)

        with pytest.raises(ValidationException):
            await use_case.execute(
                UpdateInterviewRequest(4, "U1", {InterviewField.DATE: date(2024, 1, 1)}),
                reference=at(2024, 1, 15, 10),
            )

    @pytest.mark.asyncio
    async def test_empty_changes_rejected(self, mock_interview_repository, buckets, tz):
        use_case = UpdateInterviewUseCase(mock_interview_repository, buckets, tz)

        with pytest.raises(ValidationException):
            await use_case.execute(UpdateInterviewRequest(4, "U1", {}))


# ============================================================================
# GetReminderStatsUseCase Tests
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
@pytest.mark.asyncio
async def test_reminder_stats_in_bucket_order(mock_interview_repository, buckets, tz):
    # Arrange
    mock_interview_repository.reminder_stats = AsyncMock(
        return_value={"upcoming": 5, "buckets": {"3h": {"pending": 4, "sent": 1}, "24h": {"pending": 2, "sent": 3}}}
    )
    use_case = GetReminderStatsUseCase(mock_interview_repository, buckets, tz)

    # Act
    stats = await use_case.execute(today=date(2024, 1, 15))

    # Assert
    assert stats.upcoming_interviews == 5
    assert [bucket.name for bucket in stats.buckets] == ["24h", "3h"]
    assert stats.to_dict() == {
        "upcomingInterviews": 5,
        "buckets": {"24h": {"pending": 2, "sent": 3}, "3h": {"pending": 4, "sent": 1}},
    }
