# ============================================================================
# SCOPE: APPLICATION LAYER (Interviews)
# Description: Outbound messaging port.
# ============================================================================
"""Message Transport Port."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class IMessageTransport(Protocol):
    """Interface for one-way push messages.

    Implementations: LineMessagingClient
    """

    async def push_text(self, recipient_id: str, text: str) -> None:
        """Push a text message to a recipient.

        Raises:
            MessageTransportError: When the platform rejects the push or times out.
        """
        ...
