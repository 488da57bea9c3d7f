from .interview_dtos import (
    BucketStats,
    CreateInterviewRequest,
    DeleteInterviewRequest,
    ReminderStats,
    UpdateInterviewRequest,
)
from .sweep_dtos import DispatchOutcome, SweepError, SweepResult

__all__ = [
    # Interview DTOs
    "CreateInterviewRequest",
    "UpdateInterviewRequest",
    "DeleteInterviewRequest",
    "BucketStats",
    "ReminderStats",
    # Sweep DTOs
    "DispatchOutcome",
    "SweepError",
    "SweepResult",
]
