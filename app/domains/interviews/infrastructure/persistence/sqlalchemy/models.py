"""
Interviews Domain SQLAlchemy Models

Database models for interview persistence.
Uses SQLAlchemy 2.0 style with Mapped[] type annotations.
"""

from datetime import date, time

from sqlalchemy import BigInteger, Boolean, Date, Identity, Index, String, Text, Time, false
from sqlalchemy.orm import Mapped, mapped_column

from app.models.db.base import Base, TimestampMixin

# Reminder bucket name -> flag column on the interviews table
BUCKET_FLAG_COLUMNS: dict[str, str] = {
    "24h": "reminder_24h_sent",
    "3h": "reminder_3h_sent",
}


class InterviewModel(Base, TimestampMixin):
    """SQLAlchemy model for the Interview entity."""

    __tablename__ = "interviews"

    id: Mapped[int] = mapped_column(BigInteger, Identity(always=False), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False)

    # Local date/time in the configured TIME_ZONE
    interview_date: Mapped[date] = mapped_column(Date, nullable=False)
    interview_time: Mapped[time] = mapped_column(Time, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    # Reminder flags (monotonic false -> true)
    reminder_24h_sent: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
    reminder_3h_sent: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())

    __table_args__ = (
        Index("idx_interviews_user_date_time", "user_id", "interview_date", "interview_time"),
        Index("idx_interviews_reminder_check", "interview_date", "reminder_24h_sent", "reminder_3h_sent"),
    )

    def __repr__(self):
        return f"<Interview(id={self.id}, user='{self.user_id}', at='{self.interview_date} {self.interview_time}')>"
