from .manage_interviews import (
    CreateInterviewUseCase,
    DeleteInterviewUseCase,
    GetReminderStatsUseCase,
    ListInterviewsUseCase,
    UpdateInterviewUseCase,
)
from .run_reminder_sweep import RunReminderSweepUseCase

__all__ = [
    "CreateInterviewUseCase",
    "DeleteInterviewUseCase",
    "GetReminderStatsUseCase",
    "ListInterviewsUseCase",
    "RunReminderSweepUseCase",
    "UpdateInterviewUseCase",
]
