# ============================================================================
# SCOPE: APPLICATION LAYER (Interviews)
# Description: Reminder store port used by the sweep (ISP compliant).
# ============================================================================
"""Reminder Store Port.

The two store operations the reminder sweep needs.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ...domain.entities.interview import Interview


@runtime_checkable
class IReminderStore(Protocol):
    """Interface for the reminder sweep's view of the interview store.

    Implementations: SQLAlchemyInterviewRepository
    """

    async def fetch_candidates(self, reference: datetime) -> list["Interview"]:
        """Fetch interviews that could have a bucket due at ``reference``.

        Over-fetching is allowed; every page of the window is returned.

        Raises:
            CandidateFetchError: When the store cannot be queried.
        """
        ...

    async def mark_bucket_sent(self, interview_id: int, bucket_name: str) -> bool:
        """Set a bucket flag to sent if it is still unsent.

        Returns:
            True when the flag is sent afterwards, False when the row is gone.

        Raises:
            StoreError: When the update fails.
            ValueError: For an unknown bucket name.
        """
        ...
