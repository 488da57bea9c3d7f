"""
LINE webhook signature verification.

LINE signs each webhook body with HMAC-SHA256 using the channel secret and
sends the base64 digest in the ``X-Line-Signature`` header.
"""

import base64
import hashlib
import hmac


def compute_signature(channel_secret: str, body: bytes) -> str:
    digest = hmac.new(channel_secret.encode("utf-8"), body, hashlib.sha256).digest()
    return base64.b64encode(digest).decode("utf-8")


def verify_signature(channel_secret: str, body: bytes, signature: str | None) -> bool:
    """Check a webhook body against its X-Line-Signature header."""
    if not signature or not channel_secret:
        return False
    return hmac.compare_digest(compute_signature(channel_secret, body), signature)
