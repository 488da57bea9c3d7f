# ============================================================================
# SCOPE: GLOBAL
# Description: FastAPI dependencies: container access, request gates and
#              per-request use case factories.
# ============================================================================
import hmac
import logging

from fastapi import Depends, Header, HTTPException, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.config.settings import Settings, get_settings
from app.core.container import DependencyContainer, get_container
from app.database.async_db import get_async_db
from app.domains.interviews.application.ports import IMessageTransport
from app.domains.interviews.application.services.command_handler import InterviewCommandHandler
from app.domains.interviews.application.use_cases import GetReminderStatsUseCase, RunReminderSweepUseCase
from app.domains.interviews.infrastructure.messaging.line_signature import verify_signature

logger = logging.getLogger(__name__)


# ============================================================
# CONTAINER
# ============================================================


def get_di_container() -> DependencyContainer:
    """Get Dependency Injection Container singleton."""
    return get_container()


# ============================================================
# REQUEST GATES
# ============================================================


async def verify_cron_api_key(
    x_api_key: str | None = Header(None),
    api_key: str | None = Query(None, alias="apiKey"),
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> None:
    """
    Check the shared secret protecting the reminder endpoints.

    No-op when CRON_API_KEY is not configured. Otherwise the X-API-Key
    header or the apiKey query parameter must match.
    """
    expected = settings.CRON_API_KEY
    if not expected:
        return

    provided = x_api_key or api_key
    if not provided or not hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8")):
        logger.warning("Invalid or missing API key on reminder endpoint")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid API key")


async def verify_line_signature(
    request: Request,
    x_line_signature: str | None = Header(None),
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> bytes:
    """
    Verify a LINE webhook request.

    Returns:
        Raw request body, for parsing after verification.
    """
    if not x_line_signature:
        logger.warning("Missing X-Line-Signature header")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="No signature provided")

    body = await request.body()
    if not verify_signature(settings.LINE_CHANNEL_SECRET, body, x_line_signature):
        logger.warning("LINE signature verification failed")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid signature")

    return body


# ============================================================
# USE CASES AND SERVICES
# ============================================================


def get_run_reminder_sweep_use_case(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> RunReminderSweepUseCase:
    return container.interviews.create_run_reminder_sweep_use_case(db)


def get_reminder_stats_use_case(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> GetReminderStatsUseCase:
    return container.interviews.create_get_reminder_stats_use_case(db)


def get_command_handler(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> InterviewCommandHandler:
    return container.interviews.create_command_handler(db)


def get_message_transport(
    container: DependencyContainer = Depends(get_di_container),  # noqa: B008
) -> IMessageTransport:
    return container.base.get_line_client()
