# ============================================================================
# SCOPE: APPLICATION LAYER (Interviews)
# Description: Interview CRUD port used by the command path (ISP compliant).
# ============================================================================
"""Interview Repository Port."""

from datetime import date
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...domain.entities.interview import Interview
    from ...domain.value_objects.interview_field import InterviewField


@runtime_checkable
class IInterviewRepository(Protocol):
    """Interface for interview persistence.

    Implementations: SQLAlchemyInterviewRepository
    """

    async def create(self, interview: "Interview") -> "Interview":
        """Persist a new interview, including any pre-marked bucket flags."""
        ...

    async def get_by_id(self, interview_id: int) -> "Interview | None":
        """Get interview by ID"""
        ...

    async def list_upcoming_for_user(self, user_id: str, from_date: date) -> list["Interview"]:
        """List a user's interviews on or after ``from_date``, soonest first."""
        ...

    async def update_fields(
        self,
        interview_id: int,
        user_id: str,
        changes: dict["InterviewField", Any],
    ) -> "Interview | None":
        """Apply field changes to an interview owned by ``user_id``.

        Returns:
            The updated interview, or None when missing or not owned.
        """
        ...

    async def delete(self, interview_id: int, user_id: str) -> bool:
        """Delete an interview owned by ``user_id``. False when nothing was deleted."""
        ...

    async def mark_bucket_sent(self, interview_id: int, bucket_name: str) -> bool:
        """Set a bucket flag to sent if it is still unsent."""
        ...

    async def reminder_stats(self, from_date: date) -> dict[str, Any]:
        """Counts of upcoming interviews and of pending/sent flags per bucket."""
        ...
