"""
Unit tests for RunReminderSweepUseCase.

Tests:
- Due reminder is dispatched then marked
- Failures of one pair do not stop the others
- Mark failures are reported with the mark stage
- Candidate fetch failure propagates
- Re-running a sweep does not resend
"""

from datetime import date, datetime, time
from unittest.mock import AsyncMock, patch

import pytest

from app.domains.interviews.application.services.notification_dispatcher import NotificationDispatcher
from app.domains.interviews.application.use_cases.run_reminder_sweep import RunReminderSweepUseCase
from app.domains.interviews.domain.exceptions import (
    CandidateFetchError,
    MessageTransportError,
    StoreError,
)

# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def dispatcher(mock_transport):
    return NotificationDispatcher(mock_transport)


@pytest.fixture
def use_case(mock_reminder_store, dispatcher, buckets, tz):
    return RunReminderSweepUseCase(mock_reminder_store, dispatcher, buckets, tz)


# ============================================================================
# TESTS
# ============================================================================


@pytest.mark.unit
@pytest.mark.use_case
class TestRunReminderSweep:
    @pytest.mark.asyncio
    async def test_due_reminder_is_sent_and_marked(self, use_case, mock_reminder_store, mock_transport, at, make_interview):
        """Target exactly 24h away sends and marks the 24h bucket once."""
        # Arrange
        interview = make_interview(interview_id=1)
        mock_reminder_store.fetch_candidates.return_value = [interview]

        # Act
        result = await use_case.execute(at(2024, 1, 15, 10))

        # Assert
        assert result.success is True
        assert result.reminders_sent == 1
        assert result.attempted == 1
        assert result.total_processed == 1
        assert result.errors == []
        mock_transport.push_text.assert_awaited_once()
        mock_reminder_store.mark_bucket_sent.assert_awaited_once_with(1, "24h")
        assert interview.is_bucket_sent("24h")

    @pytest.mark.asyncio
    async def test_one_failure_does_not_stop_others(self, use_case, mock_reminder_store, mock_transport, at, make_interview):
        # Arrange
        failing = make_interview(
            interview_id=7,
            user_id="U-7",
            interview_date=date(2024, 1, 15),
            interview_time=time(13, 0),
            sent=("24h",),
        )
        succeeding = make_interview(interview_id=8, user_id="U-8")
        mock_reminder_store.fetch_candidates.return_value = [failing, succeeding]

        async def push(recipient_id, text):
            if recipient_id == "U-7":
                raise MessageTransportError("HTTP 500: upstream error", status_code=500)

        mock_transport.push_text.side_effect = push

        # Act
        result = await use_case.execute(at(2024, 1, 15, 10))

        # Assert
        assert result.reminders_sent == 1
        assert result.attempted == 2
        assert len(result.errors) == 1
        error = result.errors[0]
        assert (error.event_id, error.bucket, error.stage) == (7, "3h", "dispatch")
        assert error.reason == "HTTP 500: upstream error"
        mock_reminder_store.mark_bucket_sent.assert_awaited_once_with(8, "24h")
        assert not failing.is_bucket_sent("3h")

    @pytest.mark.asyncio
    async def test_mark_failure_reported_with_mark_stage(self, use_case, mock_reminder_store, at, make_interview):
        mock_reminder_store.fetch_candidates.return_value = [make_interview(interview_id=5)]
        mock_reminder_store.mark_bucket_sent.side_effect = StoreError("connection reset")

        result = await use_case.execute(at(2024, 1, 15, 10))

        assert result.reminders_sent == 0
        assert len(result.errors) == 1
        assert result.errors[0].stage == "mark"
        assert result.errors[0].reason == "connection reset"

    @pytest.mark.asyncio
    async def test_vanished_row_reported(self, use_case, mock_reminder_store, at, make_interview):
        mock_reminder_store.fetch_candidates.return_value = [make_interview(interview_id=5)]
        mock_reminder_store.mark_bucket_sent.return_value = False

        result = await use_case.execute(at(2024, 1, 15, 10))

        assert result.reminders_sent == 0
        assert result.errors[0].reason == "interview no longer exists"

    @pytest.mark.asyncio
    async def test_fetch_failure_propagates(self, use_case, mock_reminder_store, mock_transport, at):
        mock_reminder_store.fetch_candidates.side_effect = CandidateFetchError("Failed to fetch reminder candidates")

        with pytest.raises(CandidateFetchError):
            await use_case.execute(at(2024, 1, 15, 10))

        mock_transport.push_text.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_second_sweep_does_not_resend(self, use_case, mock_reminder_store, mock_transport, at, make_interview):
        """Flags set by the first sweep exclude the pair from the next one."""
        interview = make_interview()
        mock_reminder_store.fetch_candidates.return_value = [interview]

        first = await use_case.execute(at(2024, 1, 15, 10))
        second = await use_case.execute(at(2024, 1, 15, 10, 10))

        assert first.reminders_sent == 1
        assert second.reminders_sent == 0
        assert second.attempted == 0
        assert mock_transport.push_text.await_count == 1

    @pytest.mark.asyncio
    async def test_nothing_due(self, use_case, mock_reminder_store, mock_transport, at, make_interview):
        mock_reminder_store.fetch_candidates.return_value = [make_interview()]

        result = await use_case.execute(at(2024, 1, 15, 18))

        assert result.success is True
        assert result.total_processed == 1
        assert result.reminders_sent == 0
        mock_transport.push_text.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_interview_without_time_is_skipped(self, use_case, mock_reminder_store, at, make_interview):
        broken = make_interview(interview_id=2)
        broken.interview_time = None
        mock_reminder_store.fetch_candidates.return_value = [broken, make_interview(interview_id=3)]

        result = await use_case.execute(at(2024, 1, 15, 10))

        assert result.reminders_sent == 1
        assert result.errors == []

    @pytest.mark.asyncio
    async def test_naive_reference_read_in_configured_zone(self, use_case, mock_reminder_store, make_interview):
        mock_reminder_store.fetch_candidates.return_value = [make_interview()]

        result = await use_case.execute(datetime(2024, 1, 15, 10, 0))

        reference = mock_reminder_store.fetch_candidates.await_args.args[0]
        assert reference.tzinfo is not None
        assert reference.utcoffset().total_seconds() == 8 * 3600
        assert result.reminders_sent == 1

    @pytest.mark.asyncio
    async def test_send_interval_between_sends(self, mock_reminder_store, dispatcher, buckets, tz, at, make_interview):
        use_case = RunReminderSweepUseCase(mock_reminder_store, dispatcher, buckets, tz, send_interval_seconds=0.5)
        mock_reminder_store.fetch_candidates.return_value = [
            make_interview(interview_id=1),
            make_interview(interview_id=2),
            make_interview(interview_id=3),
        ]

        with patch(
            "app.domains.interviews.application.use_cases.run_reminder_sweep.asyncio.sleep",
            new_callable=AsyncMock,
        ) as mock_sleep:
            result = await use_case.execute(at(2024, 1, 15, 10))

        assert result.reminders_sent == 3
        assert mock_sleep.await_count == 2
        mock_sleep.assert_awaited_with(0.5)
