"""
Due-Window Evaluator

Pure functions deciding which reminder buckets are due for an interview at a
reference instant. No I/O.
"""

from datetime import datetime, tzinfo
from typing import Iterable

from ..entities.interview import Interview
from ..value_objects.reminder_bucket import ReminderBucket

SECONDS_PER_HOUR = 3600.0


def hours_until(target: datetime, reference: datetime) -> float:
    """Fractional hours from reference to target (negative once target has passed).

    Both datetimes must be timezone-aware.
    """
    return (target - reference).total_seconds() / SECONDS_PER_HOUR


def evaluate_due_buckets(
    event: Interview,
    reference: datetime,
    buckets: Iterable[ReminderBucket],
    tz: tzinfo,
) -> list[str]:
    """Return the names of buckets currently due for an interview.

    A bucket is due when its flag on the interview is still unsent and the
    hours until the target instant fall inside
    ``[lead - tolerance, lead + tolerance]``. The flag is checked here even
    though the store already filters fully-notified rows.

    Args:
        event: Interview to classify.
        reference: Timezone-aware instant of the sweep.
        buckets: Ordered bucket definitions.
        tz: Zone the interview's local date/time is read in.

    Returns:
        Due bucket names in definition order.
    """
    remaining = hours_until(event.target_instant(tz), reference)
    return [
        bucket.name
        for bucket in buckets
        if not event.is_bucket_sent(bucket.name) and bucket.contains(remaining)
    ]


def unreachable_buckets(
    target: datetime,
    reference: datetime,
    buckets: Iterable[ReminderBucket],
) -> list[str]:
    """Return buckets whose window already lies in the past.

    Used when an interview is created (or moved) so close to its target that
    a bucket can never fire inside its proper window. Those buckets get
    marked sent right away.
    """
    remaining = hours_until(target, reference)
    return [bucket.name for bucket in buckets if remaining < bucket.window_start]
