# ============================================================================
# SCOPE: GLOBAL
# Description: Webhook endpoint for the LINE Messaging API.
# ============================================================================
"""
LINE Webhook Endpoint.

Each text message from an authorized user is parsed as an interview
command and answered with a push message. Events are handled one at a
time; a failing event gets an error reply and the rest still run.

ENDPOINTS:
  - POST /webhook/line → LINE message events
"""

import json
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_command_handler, get_message_transport, verify_line_signature
from app.api.schemas.line_webhook import LineEvent, LineWebhookPayload
from app.config.settings import Settings, get_settings
from app.database.async_db import get_async_db
from app.domains.interviews.application.ports import IMessageTransport
from app.domains.interviews.application.services.command_handler import (
    GENERIC_ERROR_MESSAGE,
    UNAUTHORIZED_MESSAGE,
    InterviewCommandHandler,
)
from app.domains.interviews.domain.exceptions import MessageTransportError

router = APIRouter(tags=["webhook"])
logger = logging.getLogger(__name__)


def is_authorized(user_id: str, settings: Settings) -> bool:
    """Only users listed in AUTHORIZED_USERS may issue commands."""
    return user_id in settings.AUTHORIZED_USERS


async def _reply(transport: IMessageTransport, user_id: str, text: str) -> None:
    try:
        await transport.push_text(user_id, text)
    except MessageTransportError as e:
        logger.error(f"Failed to reply to {user_id}: {e.message}")


async def _handle_event(
    event: LineEvent,
    handler: InterviewCommandHandler,
    transport: IMessageTransport,
    db: AsyncSession,
    settings: Settings,
) -> None:
    user_id = event.user_id
    if not event.is_text_message or not user_id or event.message is None:
        return

    if not is_authorized(user_id, settings):
        logger.warning(f"Unauthorized user attempt: {user_id}")
        await _reply(transport, user_id, UNAUTHORIZED_MESSAGE)
        return

    try:
        reply = await handler.handle(user_id, event.message.text or "")
    except Exception as e:
        logger.error(f"Error processing command from {user_id}: {e}", exc_info=True)
        await db.rollback()
        reply = GENERIC_ERROR_MESSAGE

    await _reply(transport, user_id, reply)


@router.post("/webhook/line")
async def line_webhook(
    body: bytes = Depends(verify_line_signature),  # noqa: B008
    handler: InterviewCommandHandler = Depends(get_command_handler),  # noqa: B008
    transport: IMessageTransport = Depends(get_message_transport),  # noqa: B008
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
):
    """
    Process LINE webhook events.

    The signature is verified against the raw body before anything is parsed.
    """
    try:
        payload = LineWebhookPayload.model_validate(json.loads(body))
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
        logger.error(f"Invalid LINE webhook payload: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid payload") from e

    logger.info(f"LINE webhook received with {len(payload.events)} event(s)")

    for event in payload.events:
        await _handle_event(event, handler, transport, db, settings)

    return {"status": "OK"}
