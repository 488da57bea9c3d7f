"""
LINE messaging adapters
"""

from .line_client import LineMessagingClient
from .line_signature import compute_signature, verify_signature

__all__ = ["LineMessagingClient", "compute_signature", "verify_signature"]
