# ============================================================================
# SCOPE: GLOBAL
# Description: Reminder sweep trigger and reminder statistics.
# ============================================================================
"""
Reminder Endpoints.

ENDPOINTS:
  - GET|POST /reminders/sweep → Run exactly one reminder sweep
  - GET /reminders/stats → Pending/sent counters per bucket

Both are meant for an external cron caller and share the optional
CRON_API_KEY gate.
"""

import logging
from datetime import UTC, datetime

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from app.api.dependencies import get_reminder_stats_use_case, get_run_reminder_sweep_use_case, verify_cron_api_key
from app.api.schemas.reminders import ReminderStatsResponse, SweepFailureResponse, SweepResponse
from app.domains.interviews.application.use_cases import GetReminderStatsUseCase, RunReminderSweepUseCase
from app.domains.interviews.domain.exceptions import CandidateFetchError

router = APIRouter(prefix="/reminders", tags=["reminders"], dependencies=[Depends(verify_cron_api_key)])
logger = logging.getLogger(__name__)


@router.get(
    "/sweep",
    response_model=SweepResponse,
    responses={500: {"model": SweepFailureResponse}},
)
@router.post(
    "/sweep",
    response_model=SweepResponse,
    responses={500: {"model": SweepFailureResponse}},
)
async def run_reminder_sweep(
    use_case: RunReminderSweepUseCase = Depends(get_run_reminder_sweep_use_case),  # noqa: B008
):
    """
    Run one reminder sweep.

    Partial failures still return 200 with the per-reminder errors listed.
    Only a failed candidate fetch returns 500.
    """
    try:
        result = await use_case.execute()
    except CandidateFetchError as e:
        logger.error(f"Reminder sweep failed: {e.message}")
        failure = SweepFailureResponse(error=e.message, timestamp=datetime.now(UTC))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=failure.model_dump(mode="json", by_alias=True),
        )

    return SweepResponse.from_result(result)


@router.get("/stats", response_model=ReminderStatsResponse)
async def get_reminder_stats(
    use_case: GetReminderStatsUseCase = Depends(get_reminder_stats_use_case),  # noqa: B008
):
    """Counts of upcoming interviews and of pending/sent reminders per bucket."""
    stats = await use_case.execute()
    return ReminderStatsResponse.from_stats(stats, timestamp=datetime.now(UTC))
