"""Interview Entity.

A scheduled interview owned by a LINE user. Carries one monotonic
"sent" flag per reminder bucket.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time, tzinfo

import pytz

from app.core.domain.entities import Entity


@dataclass(eq=False)
class Interview(Entity[int]):
    """Interview scheduled through the bot.

    The target instant is ``interview_date`` + ``interview_time`` read in a
    single configured time zone.
    """

    user_id: str = ""
    interview_date: date | None = None
    interview_time: time | None = None
    description: str = ""

    # bucket name -> sent flag; a missing key means not sent
    reminders_sent: dict[str, bool] = field(default_factory=dict)

    def target_instant(self, tz: tzinfo) -> datetime:
        """Resolve the interview to one timezone-aware instant.

        Ambiguous or non-existent local times (DST transitions) resolve with
        ``is_dst=False`` so every interview maps to exactly one instant.

        Raises:
            ValueError: If date or time is missing.
        """
        if self.interview_date is None or self.interview_time is None:
            raise ValueError(f"Interview {self.id} has no date/time")
        naive = datetime.combine(self.interview_date, self.interview_time)
        if isinstance(tz, pytz.BaseTzInfo):
            return tz.localize(naive, is_dst=False)
        return naive.replace(tzinfo=tz)

    def is_bucket_sent(self, bucket_name: str) -> bool:
        return self.reminders_sent.get(bucket_name, False)

    def mark_bucket_sent(self, bucket_name: str) -> None:
        """Flip a bucket flag to sent. Flags never revert."""
        if not self.is_bucket_sent(bucket_name):
            self.reminders_sent[bucket_name] = True
            self.touch()

    def is_owned_by(self, user_id: str) -> bool:
        return self.user_id == user_id

    def reschedule(self, new_date: date | None = None, new_time: time | None = None) -> None:
        """Move the interview. Sent flags are left untouched."""
        if new_date is not None:
            self.interview_date = new_date
        if new_time is not None:
            self.interview_time = new_time
        self.touch()

    def update_description(self, description: str) -> None:
        self.description = description
        self.touch()

    # Properties for message formatting
    @property
    def formatted_date(self) -> str:
        """Date formatted for messages (YYYY-MM-DD)."""
        if self.interview_date is None:
            return ""
        return self.interview_date.strftime("%Y-%m-%d")

    @property
    def formatted_time(self) -> str:
        """Time formatted for messages (HH:MM)."""
        if self.interview_time is None:
            return ""
        return self.interview_time.strftime("%H:%M")

    @classmethod
    def create(
        cls,
        user_id: str,
        interview_date: date,
        interview_time: time,
        description: str,
    ) -> "Interview":
        """Factory for a new interview with every bucket unsent."""
        return cls(
            user_id=user_id,
            interview_date=interview_date,
            interview_time=interview_time,
            description=description,
        )
