"""Interview Field Value Object.

Closed set of interview attributes the update command may change.
"""

from enum import Enum


class InterviewField(str, Enum):
    """Updatable interview fields."""

    DATE = "date"
    TIME = "time"
    DESCRIPTION = "description"

    @property
    def column_name(self) -> str:
        """Persistence column backing this field."""
        columns = {
            "date": "interview_date",
            "time": "interview_time",
            "description": "description",
        }
        return columns[self.value]

    def changes_schedule(self) -> bool:
        """Whether changing this field moves the interview's target instant."""
        return self in (InterviewField.DATE, InterviewField.TIME)
