"""
Interviews SQLAlchemy persistence
"""

from .interview_repository import SQLAlchemyInterviewRepository, flag_column_for
from .models import BUCKET_FLAG_COLUMNS, InterviewModel

__all__ = [
    "BUCKET_FLAG_COLUMNS",
    "InterviewModel",
    "SQLAlchemyInterviewRepository",
    "flag_column_for",
]
