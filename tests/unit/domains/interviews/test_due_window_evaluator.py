"""
Unit tests for the due-window evaluator.

Tests:
- hours_until
- evaluate_due_buckets (closed window edges, sent flags, bucket order)
- unreachable_buckets
"""

from datetime import timedelta

import pytest

from app.domains.interviews.domain.services.due_window_evaluator import (
    evaluate_due_buckets,
    hours_until,
    unreachable_buckets,
)


@pytest.mark.unit
class TestHoursUntil:
    def test_exact_day(self, at):
        assert hours_until(at(2024, 1, 16, 10), at(2024, 1, 15, 10)) == 24.0

    def test_fractional(self, at):
        assert hours_until(at(2024, 1, 16, 10), at(2024, 1, 16, 7, 15)) == 2.75

    def test_negative_once_passed(self, at):
        assert hours_until(at(2024, 1, 15, 9), at(2024, 1, 15, 10)) == -1.0


@pytest.mark.unit
class TestEvaluateDueBuckets:
    def test_exactly_24h_before_target(self, at, tz, buckets, make_interview):
        """24h bucket is due at the nominal lead time."""
        # Arrange
        interview = make_interview()

        # Act
        due = evaluate_due_buckets(interview, at(2024, 1, 15, 10), buckets, tz)

        # Assert
        assert due == ["24h"]

    def test_3h_due_when_24h_already_sent(self, at, tz, buckets, make_interview):
        """A sent flag excludes its bucket even inside the window."""
        interview = make_interview(sent=("24h",))

        due = evaluate_due_buckets(interview, at(2024, 1, 16, 7, 15), buckets, tz)

        assert due == ["3h"]

    @pytest.mark.parametrize("offset_minutes", [-30, 30])
    def test_window_edges_are_inclusive(self, at, tz, buckets, make_interview, offset_minutes):
        interview = make_interview()
        reference = at(2024, 1, 15, 10) + timedelta(minutes=offset_minutes)

        assert evaluate_due_buckets(interview, reference, buckets, tz) == ["24h"]

    @pytest.mark.parametrize("offset_seconds", [-1801, 1801])
    def test_just_outside_window(self, at, tz, buckets, make_interview, offset_seconds):
        interview = make_interview()
        reference = at(2024, 1, 15, 10) + timedelta(seconds=offset_seconds)

        assert evaluate_due_buckets(interview, reference, buckets, tz) == []

    def test_nothing_due_between_windows(self, at, tz, buckets, make_interview):
        interview = make_interview()

        assert evaluate_due_buckets(interview, at(2024, 1, 15, 22), buckets, tz) == []

    def test_nothing_due_after_target(self, at, tz, buckets, make_interview):
        interview = make_interview()

        assert evaluate_due_buckets(interview, at(2024, 1, 16, 11), buckets, tz) == []

    def test_overlapping_windows_keep_definition_order(self, at, tz, make_interview):
        from app.domains.interviews.domain.value_objects.reminder_bucket import ReminderBucket

        wide = (
            ReminderBucket(name="24h", lead_hours=4.0, tolerance_hours=2.0),
            ReminderBucket(name="3h", lead_hours=3.0, tolerance_hours=1.0),
        )
        interview = make_interview()

        due = evaluate_due_buckets(interview, at(2024, 1, 16, 7), wide, tz)

        assert due == ["24h", "3h"]

    def test_reference_in_other_zone_is_same_instant(self, at, tz, buckets, make_interview):
        """The evaluator compares instants, not wall-clock values."""
        import pytz

        interview = make_interview()
        reference_utc = at(2024, 1, 15, 10).astimezone(pytz.utc)

        assert evaluate_due_buckets(interview, reference_utc, buckets, tz) == ["24h"]

    def test_missing_time_raises(self, at, tz, buckets, make_interview):
        interview = make_interview()
        interview.interview_time = None

        with pytest.raises(ValueError):
            evaluate_due_buckets(interview, at(2024, 1, 15, 10), buckets, tz)


@pytest.mark.unit
class TestUnreachableBuckets:
    def test_thirty_minutes_before_target(self, at, buckets):
        target = at(2024, 1, 15, 11)

        assert unreachable_buckets(target, at(2024, 1, 15, 10, 30), buckets) == ["24h", "3h"]

    def test_ten_hours_before_target(self, at, buckets):
        assert unreachable_buckets(at(2024, 1, 15, 20), at(2024, 1, 15, 10), buckets) == ["24h"]

    def test_inside_window_is_still_reachable(self, at, buckets):
        """Creating inside a window leaves the bucket for the next sweep."""
        assert unreachable_buckets(at(2024, 1, 16, 9, 40), at(2024, 1, 15, 10), buckets) == []

    def test_far_future(self, at, buckets):
        assert unreachable_buckets(at(2024, 2, 1, 10), at(2024, 1, 15, 10), buckets) == []
