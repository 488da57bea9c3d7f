"""
LINE Messaging API Client.

Single Responsibility: Handle HTTP communication with the LINE Messaging API.
"""

import logging
from typing import Any

import httpx

from app.domains.interviews.domain.exceptions import MessageTransportError

logger = logging.getLogger(__name__)

# LINE rejects text messages longer than this
MAX_TEXT_LENGTH = 5000


class LineMessagingClient:
    """
    HTTP client for the LINE Messaging API.

    Implements IMessageTransport through ``push_text``.
    """

    def __init__(
        self,
        access_token: str,
        base_url: str = "https://api.line.me",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize HTTP client.

        Args:
            access_token: Channel access token (Bearer)
            base_url: LINE API base URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (mock transport in tests)
        """
        self._access_token = access_token
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    @property
    def push_url(self) -> str:
        return f"{self._base_url}/v2/bot/message/push"

    @property
    def headers(self) -> dict[str, str]:
        """Get standard headers for requests."""
        return {
            "Authorization": f"Bearer {self._access_token}",
            "Content-Type": "application/json",
        }

    async def post(self, url: str, payload: dict[str, Any]) -> dict[str, Any]:
        """
        Execute POST request to the LINE API.

        Returns:
            Response dictionary with success/error status
        """
        try:
            logger.debug(f"POST {url}")

            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.post(url, json=payload, headers=self.headers)

            logger.info(f"LINE API Response: {response.status_code}")

            if response.status_code == 200:
                return {"success": True, "data": self._parse_body(response)}
            return self._handle_error_response(response)

        except httpx.TimeoutException:
            return {"success": False, "error": "Timeout connecting to LINE API"}
        except httpx.ConnectError:
            return {"success": False, "error": "Connection error with LINE API"}
        except httpx.HTTPError as e:
            logger.error(f"HTTP error calling LINE API: {e}")
            return {"success": False, "error": f"HTTP error: {e}"}

    @staticmethod
    def _parse_body(response: httpx.Response) -> dict[str, Any]:
        """Decode a success body; LINE answers push requests with {} or nothing."""
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError:
            logger.warning(f"Non-JSON success body from LINE API: {response.text[:200]}")
            return {}

    async def push_text(self, recipient_id: str, text: str) -> None:
        """
        Push a text message to a LINE user.

        Raises:
            MessageTransportError: When LINE does not accept the message.
        """
        if len(text) > MAX_TEXT_LENGTH:
            text = text[: MAX_TEXT_LENGTH - 1] + "…"

        payload = {"to": recipient_id, "messages": [{"type": "text", "text": text}]}
        result = await self.post(self.push_url, payload)

        if not result["success"]:
            raise MessageTransportError(result["error"], status_code=result.get("status_code"))

    def _handle_error_response(self, response: httpx.Response) -> dict[str, Any]:
        """Handle error response from API."""
        error_detail = response.text
        logger.error(f"Error {response.status_code}: {error_detail}")

        try:
            error_message = response.json().get("message", error_detail)
        except ValueError:
            error_message = error_detail

        return {
            "success": False,
            "error": f"HTTP {response.status_code}: {error_message}",
            "status_code": response.status_code,
        }
