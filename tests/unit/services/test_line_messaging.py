"""
Unit tests for the LINE messaging client and webhook signature helpers.
"""

import json

import httpx
import pytest

from app.domains.interviews.domain.exceptions import MessageTransportError
from app.domains.interviews.infrastructure.messaging.line_client import MAX_TEXT_LENGTH, LineMessagingClient
from app.domains.interviews.infrastructure.messaging.line_signature import compute_signature, verify_signature


def make_client(handler) -> LineMessagingClient:
    return LineMessagingClient(access_token="token-123", transport=httpx.MockTransport(handler))


@pytest.mark.unit
class TestLineMessagingClient:
    @pytest.mark.asyncio
    async def test_push_text_request(self):
        # Arrange
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={})

        client = make_client(handler)

        # Act
        await client.push_text("U-recipient", "hello")

        # Assert
        request = captured[0]
        assert str(request.url) == "https://api.line.me/v2/bot/message/push"
        assert request.headers["Authorization"] == "Bearer token-123"
        assert json.loads(request.content) == {
            "to": "U-recipient",
            "messages": [{"type": "text", "text": "hello"}],
        }

    @pytest.mark.asyncio
    async def test_error_status_raises(self):
        client = make_client(lambda request: httpx.Response(400, json={"message": "The request body has 1 error(s)"}))

        with pytest.raises(MessageTransportError) as exc_info:
            await client.push_text("U1", "hello")

        assert exc_info.value.status_code == 400
        assert "The request body has 1 error(s)" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_non_json_success_body_is_accepted(self):
        client = make_client(lambda request: httpx.Response(200, text="OK"))

        result = await client.post(client.push_url, {"to": "U1", "messages": []})
        await client.push_text("U1", "hello")

        assert result == {"success": True, "data": {}}

    @pytest.mark.asyncio
    async def test_timeout_raises(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(MessageTransportError, match="Timeout"):
            await make_client(handler).push_text("U1", "hello")

    @pytest.mark.asyncio
    async def test_connect_error_raises(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(MessageTransportError, match="Connection error"):
            await make_client(handler).push_text("U1", "hello")

    @pytest.mark.asyncio
    async def test_long_text_truncated(self):
        captured: list[dict] = []

        def handler(request):
            captured.append(json.loads(request.content))
            return httpx.Response(200, json={})

        await make_client(handler).push_text("U1", "x" * (MAX_TEXT_LENGTH + 100))

        assert len(captured[0]["messages"][0]["text"]) == MAX_TEXT_LENGTH


@pytest.mark.unit
class TestLineSignature:
    def test_valid_signature(self):
        body = b'{"events":[]}'
        signature = compute_signature("secret", body)

        assert verify_signature("secret", body, signature)

    def test_tampered_body(self):
        signature = compute_signature("secret", b'{"events":[]}')

        assert not verify_signature("secret", b'{"events":[{}]}', signature)

    def test_wrong_secret(self):
        body = b"{}"

        assert not verify_signature("other", body, compute_signature("secret", body))

    @pytest.mark.parametrize("signature", [None, ""])
    def test_missing_signature(self, signature):
        assert not verify_signature("secret", b"{}", signature)
