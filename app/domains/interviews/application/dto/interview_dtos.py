# ============================================================================
# SCOPE: APPLICATION LAYER (Interviews)
# Description: Data Transfer Objects for interview commands and queries.
# ============================================================================
"""Interview DTOs."""

from dataclasses import dataclass, field
from datetime import date, time
from typing import Any

from ...domain.value_objects.interview_field import InterviewField

# =============================================================================
# Request DTOs
# =============================================================================


@dataclass(frozen=True)
class CreateInterviewRequest:
    """Request DTO for scheduling a new interview."""

    user_id: str
    interview_date: date
    interview_time: time
    description: str


@dataclass(frozen=True)
class UpdateInterviewRequest:
    """Request DTO for changing fields of an owned interview."""

    interview_id: int
    user_id: str
    changes: dict[InterviewField, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class DeleteInterviewRequest:
    """Request DTO for deleting an owned interview."""

    interview_id: int
    user_id: str


# =============================================================================
# Result DTOs
# =============================================================================


@dataclass(frozen=True)
class BucketStats:
    """Pending and sent counts for one bucket over upcoming interviews."""

    name: str
    pending: int = 0
    sent: int = 0


@dataclass(frozen=True)
class ReminderStats:
    """Reminder counters over interviews dated today or later."""

    upcoming_interviews: int = 0
    buckets: list[BucketStats] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "upcomingInterviews": self.upcoming_interviews,
            "buckets": {bucket.name: {"pending": bucket.pending, "sent": bucket.sent} for bucket in self.buckets},
        }
