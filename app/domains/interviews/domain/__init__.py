"""
Interviews Domain Layer

Entities, value objects and the due-window evaluator for interview reminders.
"""

from .entities import Interview
from .exceptions import CandidateFetchError, MessageTransportError, NoRecipientConfiguredError, StoreError
from .services import evaluate_due_buckets, hours_until, unreachable_buckets
from .value_objects import InterviewField, ReminderBucket, buckets_from_config, max_horizon_hours

__all__ = [
    "Interview",
    "InterviewField",
    "ReminderBucket",
    "buckets_from_config",
    "max_horizon_hours",
    "evaluate_due_buckets",
    "hours_until",
    "unreachable_buckets",
    "CandidateFetchError",
    "MessageTransportError",
    "NoRecipientConfiguredError",
    "StoreError",
]
