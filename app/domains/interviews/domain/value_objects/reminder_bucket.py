"""Reminder Bucket Value Object.

A bucket is a named reminder category defined by a nominal lead time before
the interview and a symmetric tolerance window around that lead time.
"""

from dataclasses import dataclass
from typing import Any, Iterable

from app.core.domain.exceptions import ValidationException
from app.core.domain.value_objects import ValueObject


@dataclass(frozen=True)
class ReminderBucket(ValueObject):
    """Reminder category such as "24h" or "3h"."""

    name: str
    lead_hours: float
    tolerance_hours: float = 0.5
    label: str = ""

    def _validate(self) -> None:
        if not self.name:
            raise ValidationException("Bucket name is required", field="name")
        if self.lead_hours <= 0:
            raise ValidationException(f"Bucket '{self.name}' needs a positive lead time", field="lead_hours")
        if self.tolerance_hours < 0:
            raise ValidationException(
                f"Bucket '{self.name}' tolerance cannot be negative", field="tolerance_hours"
            )
        if self.tolerance_hours >= self.lead_hours:
            raise ValidationException(
                f"Bucket '{self.name}' tolerance must be smaller than its lead time", field="tolerance_hours"
            )

    @property
    def window_start(self) -> float:
        """Smallest hours-until value that still counts as due."""
        return self.lead_hours - self.tolerance_hours

    @property
    def window_end(self) -> float:
        """Largest hours-until value that already counts as due."""
        return self.lead_hours + self.tolerance_hours

    @property
    def display_label(self) -> str:
        return self.label or f"{self.lead_hours:g} hours"

    def contains(self, hours_until: float) -> bool:
        """Check whether an hours-until value falls inside the closed window."""
        return self.window_start <= hours_until <= self.window_end

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ReminderBucket":
        return cls(
            name=str(data["name"]),
            lead_hours=float(data["lead_hours"]),
            tolerance_hours=float(data.get("tolerance_hours", 0.5)),
            label=str(data.get("label") or ""),
        )


def buckets_from_config(definitions: Iterable[dict[str, Any]]) -> tuple[ReminderBucket, ...]:
    """Build the ordered bucket tuple from settings definitions.

    Args:
        definitions: Dicts with name, lead_hours and optional tolerance_hours / label.

    Returns:
        Buckets in definition order.

    Raises:
        ValidationException: On duplicate names or invalid values.
    """
    buckets = tuple(ReminderBucket.from_dict(item) for item in definitions)
    names = [bucket.name for bucket in buckets]
    if len(set(names)) != len(names):
        raise ValidationException("Reminder bucket names must be unique", field="REMINDER_BUCKETS")
    return buckets


def max_horizon_hours(buckets: Iterable[ReminderBucket]) -> float:
    """Largest window end across buckets (0 when there are none)."""
    return max((bucket.window_end for bucket in buckets), default=0.0)
