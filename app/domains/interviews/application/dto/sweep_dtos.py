# ============================================================================
# SCOPE: APPLICATION LAYER (Interviews)
# Description: Data Transfer Objects for the reminder sweep.
# ============================================================================
"""Sweep DTOs.

Outcomes of dispatching a single reminder and the aggregate of one sweep.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Literal

SweepStage = Literal["dispatch", "mark"]


@dataclass(frozen=True)
class DispatchOutcome:
    """Result of handing one reminder to the transport."""

    sent: bool
    reason: str | None = None
    recipient_id: str | None = None

    @classmethod
    def success(cls, recipient_id: str) -> "DispatchOutcome":
        return cls(sent=True, recipient_id=recipient_id)

    @classmethod
    def failed(cls, reason: str, recipient_id: str | None = None) -> "DispatchOutcome":
        return cls(sent=False, reason=reason, recipient_id=recipient_id)


@dataclass(frozen=True)
class SweepError:
    """Per (interview, bucket) failure recorded by a sweep."""

    event_id: int | None
    bucket: str
    stage: SweepStage
    reason: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.event_id,
            "bucket": self.bucket,
            "stage": self.stage,
            "reason": self.reason,
        }


@dataclass(frozen=True)
class SweepResult:
    """Aggregate of one sweep invocation."""

    success: bool
    total_processed: int = 0
    attempted: int = 0
    reminders_sent: int = 0
    errors: list[SweepError] = field(default_factory=list)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    @property
    def failed_count(self) -> int:
        return len(self.errors)
