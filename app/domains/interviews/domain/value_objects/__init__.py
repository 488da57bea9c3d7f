# Domain Value Objects
from .interview_field import InterviewField
from .reminder_bucket import ReminderBucket, buckets_from_config, max_horizon_hours

__all__ = ["InterviewField", "ReminderBucket", "buckets_from_config", "max_horizon_hours"]
