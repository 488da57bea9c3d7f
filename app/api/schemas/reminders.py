# ============================================================================
# SCOPE: PUBLIC API
# Description: Pydantic schemas for the reminder sweep and stats endpoints.
# ============================================================================
"""
Reminder API Schemas.

Responses use camelCase keys for the external cron caller.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.domains.interviews.application.dto.interview_dtos import ReminderStats
from app.domains.interviews.application.dto.sweep_dtos import SweepResult


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SweepErrorSchema(CamelModel):
    """One (interview, bucket) pair that failed."""

    id: int | None = Field(..., description="Interview ID")
    bucket: str = Field(..., description="Reminder bucket name")
    stage: Literal["dispatch", "mark"] = Field(..., description="Step that failed")
    reason: str = Field(..., description="Failure reason")


class SweepResponse(CamelModel):
    """Summary of one reminder sweep."""

    success: bool = True
    reminders_sent: int = Field(0, description="Reminders delivered and marked")
    total_processed: int = Field(0, description="Candidate interviews examined")
    attempted: int = Field(0, description="Due (interview, bucket) pairs attempted")
    errors: list[SweepErrorSchema] = Field(default_factory=list)
    timestamp: datetime

    @classmethod
    def from_result(cls, result: SweepResult) -> SweepResponse:
        return cls(
            success=result.success,
            reminders_sent=result.reminders_sent,
            total_processed=result.total_processed,
            attempted=result.attempted,
            errors=[
                SweepErrorSchema(id=error.event_id, bucket=error.bucket, stage=error.stage, reason=error.reason)
                for error in result.errors
            ],
            timestamp=result.timestamp,
        )


class SweepFailureResponse(CamelModel):
    """Returned when candidates could not be fetched."""

    success: Literal[False] = False
    error: str
    timestamp: datetime


class BucketStatsSchema(CamelModel):
    pending: int = 0
    sent: int = 0


class ReminderStatsResponse(CamelModel):
    """Reminder counters over interviews dated today or later."""

    upcoming_interviews: int = 0
    buckets: dict[str, BucketStatsSchema] = Field(default_factory=dict)
    timestamp: datetime

    @classmethod
    def from_stats(cls, stats: ReminderStats, timestamp: datetime) -> ReminderStatsResponse:
        return cls(
            upcoming_interviews=stats.upcoming_interviews,
            buckets={
                bucket.name: BucketStatsSchema(pending=bucket.pending, sent=bucket.sent) for bucket in stats.buckets
            },
            timestamp=timestamp,
        )
