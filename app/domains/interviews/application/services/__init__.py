from .command_handler import InterviewCommandHandler
from .notification_dispatcher import NotificationDispatcher, format_reminder_message

__all__ = [
    "InterviewCommandHandler",
    "NotificationDispatcher",
    "format_reminder_message",
]
