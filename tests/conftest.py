"""
Shared pytest fixtures for all tests.

This module provides the reminder buckets, time zone, interview factory and
mock collaborators shared by the unit and integration tests.
"""

import os
from datetime import date, datetime, time
from unittest.mock import AsyncMock

import pytest
import pytz

# Ensure test environment before any app module reads settings
os.environ["ENVIRONMENT"] = "test"
os.environ["TESTING"] = "true"
os.environ.setdefault("LINE_CHANNEL_ACCESS_TOKEN", "test-access-token")
os.environ.setdefault("LINE_CHANNEL_SECRET", "test-channel-secret")
os.environ.setdefault("TIME_ZONE", "Asia/Taipei")

from app.domains.interviews.domain.entities.interview import Interview  # noqa: E402
from app.domains.interviews.domain.value_objects.reminder_bucket import ReminderBucket  # noqa: E402

# ============================================================================
# TIME FIXTURES
# ============================================================================


@pytest.fixture
def tz():
    """Configured interview time zone."""
    return pytz.timezone("Asia/Taipei")


@pytest.fixture
def at(tz):
    """Build an aware instant in the configured zone: at(2024, 1, 15, 10)."""

    def _at(year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> datetime:
        return tz.localize(datetime(year, month, day, hour, minute), is_dst=False)

    return _at


# ============================================================================
# REMINDER FIXTURES
# ============================================================================


@pytest.fixture
def bucket_24h() -> ReminderBucket:
    return ReminderBucket(name="24h", lead_hours=24.0, tolerance_hours=0.5, label="24 hours")


@pytest.fixture
def bucket_3h() -> ReminderBucket:
    return ReminderBucket(name="3h", lead_hours=3.0, tolerance_hours=0.5, label="3 hours")


@pytest.fixture
def buckets(bucket_24h, bucket_3h) -> tuple[ReminderBucket, ...]:
    return (bucket_24h, bucket_3h)


@pytest.fixture
def make_interview():
    """Factory for interview entities with sensible defaults."""

    def _make(
        interview_id: int | None = 1,
        user_id: str = "U-owner",
        interview_date: date = date(2024, 1, 16),
        interview_time: time = time(10, 0),
        description: str = "Interview with Google",
        sent: tuple[str, ...] = (),
    ) -> Interview:
        return Interview(
            id=interview_id,
            user_id=user_id,
            interview_date=interview_date,
            interview_time=interview_time,
            description=description,
            reminders_sent={"24h": "24h" in sent, "3h": "3h" in sent},
        )

    return _make


# ============================================================================
# COLLABORATOR FIXTURES
# ============================================================================


@pytest.fixture
def mock_transport():
    """Create a mock message transport."""
    mock = AsyncMock()
    mock.push_text = AsyncMock(return_value=None)
    return mock


@pytest.fixture
def mock_reminder_store():
    """Create a mock reminder store."""
    mock = AsyncMock()
    mock.fetch_candidates = AsyncMock(return_value=[])
    mock.mark_bucket_sent = AsyncMock(return_value=True)
    return mock


@pytest.fixture
def mock_interview_repository():
    """Create a mock interview repository."""
    mock = AsyncMock()
    mock.get_by_id = AsyncMock(return_value=None)
    mock.list_upcoming_for_user = AsyncMock(return_value=[])
    mock.delete = AsyncMock(return_value=True)
    mock.mark_bucket_sent = AsyncMock(return_value=True)
    return mock
