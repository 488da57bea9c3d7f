# ============================================================================
# SCOPE: APPLICATION LAYER (Interviews)
# Description: Ports (interfaces) for the store and the messaging platform.
# ============================================================================
"""Interviews Application Ports.

Segregated Interfaces:
- IReminderStore: candidate fetch and mark-sent for the sweep
- IInterviewRepository: interview CRUD for the command path
- IMessageTransport: push messages to LINE users
"""

from .interview_repository_port import IInterviewRepository
from .message_transport_port import IMessageTransport
from .reminder_store_port import IReminderStore

__all__ = [
    "IInterviewRepository",
    "IMessageTransport",
    "IReminderStore",
]
