"""
API schemas package.
"""

from .line_webhook import LineEvent, LineMessage, LineSource, LineWebhookPayload
from .reminders import (
    BucketStatsSchema,
    ReminderStatsResponse,
    SweepErrorSchema,
    SweepFailureResponse,
    SweepResponse,
)

__all__ = [
    "BucketStatsSchema",
    "LineEvent",
    "LineMessage",
    "LineSource",
    "LineWebhookPayload",
    "ReminderStatsResponse",
    "SweepErrorSchema",
    "SweepFailureResponse",
    "SweepResponse",
]
