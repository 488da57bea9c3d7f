# ============================================================================
# SCOPE: APPLICATION LAYER (Interviews)
# Description: Formats and delivers one interview reminder.
# ============================================================================
"""Notification Dispatcher.

Resolves the recipient for an interview reminder, formats the message and
hands it to the message transport. It never marks a bucket sent.
"""

import logging
from typing import TYPE_CHECKING

from ...domain.exceptions import MessageTransportError, NoRecipientConfiguredError
from ..dto.sweep_dtos import DispatchOutcome

if TYPE_CHECKING:
    from ...domain.entities.interview import Interview
    from ...domain.value_objects.reminder_bucket import ReminderBucket
    from ..ports import IMessageTransport

logger = logging.getLogger(__name__)


def format_reminder_message(interview: "Interview", bucket: "ReminderBucket") -> str:
    """Build the reminder text: bucket label, description, date and time."""
    description = interview.description or "(no description)"
    return (
        f"⏰ Interview reminder: starts in {bucket.display_label}\n\n"
        f"📝 {description}\n"
        f"📅 Date: {interview.formatted_date}\n"
        f"🕐 Time: {interview.formatted_time}"
    )


class NotificationDispatcher:
    """Deliver reminders through an injected transport.

    A fixed recipient, when configured, receives every reminder regardless
    of who owns the interview. Otherwise the owner receives it.
    """

    def __init__(self, transport: "IMessageTransport", fixed_recipient_id: str | None = None):
        """
        Args:
            transport: Outbound messaging interface (DIP).
            fixed_recipient_id: Recipient overriding the interview owner.
        """
        self._transport = transport
        self._fixed_recipient_id = fixed_recipient_id or None

    def resolve_recipient(self, interview: "Interview") -> str:
        """
        Raises:
            NoRecipientConfiguredError: If no fixed recipient and no owner exist.
        """
        recipient = self._fixed_recipient_id or interview.user_id
        if not recipient:
            raise NoRecipientConfiguredError(interview.id)
        return recipient

    async def dispatch(self, interview: "Interview", bucket: "ReminderBucket") -> DispatchOutcome:
        """Send one reminder. Failures are reported in the outcome, not raised."""
        try:
            recipient = self.resolve_recipient(interview)
        except NoRecipientConfiguredError as e:
            return DispatchOutcome.failed(e.message)

        text = format_reminder_message(interview, bucket)

        try:
            await self._transport.push_text(recipient, text)
        except MessageTransportError as e:
            return DispatchOutcome.failed(e.message, recipient_id=recipient)
        except Exception as e:
            logger.error(f"Unexpected transport failure for interview {interview.id}: {e}")
            return DispatchOutcome.failed(str(e) or e.__class__.__name__, recipient_id=recipient)

        logger.debug(f"Reminder {bucket.name} for interview {interview.id} handed to transport")
        return DispatchOutcome.success(recipient)
