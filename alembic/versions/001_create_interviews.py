"""Create interviews table.

Revision ID: 001_create_interviews
Revises:
Create Date: 2026-10-19

Creates the interviews table with one boolean flag per reminder bucket
(reminder_24h_sent, reminder_3h_sent) plus the indexes used by the
per-user listing and the reminder sweep. An updated_at trigger keeps the
timestamp current for writes that bypass the ORM.
"""

from typing import Sequence, Union

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001_create_interviews"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create interviews table, indexes and updated_at trigger."""
    op.execute(
        """
        CREATE TABLE IF NOT EXISTS interviews (
            id BIGINT GENERATED BY DEFAULT AS IDENTITY PRIMARY KEY,
            user_id VARCHAR(255) NOT NULL,
            interview_date DATE NOT NULL,
            interview_time TIME NOT NULL,
            description TEXT NOT NULL DEFAULT '',
            reminder_24h_sent BOOLEAN NOT NULL DEFAULT FALSE,
            reminder_3h_sent BOOLEAN NOT NULL DEFAULT FALSE,
            created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT NOW(),
            updated_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT NOW()
        )
        """
    )

    op.execute(
        """
        CREATE INDEX IF NOT EXISTS idx_interviews_user_date_time
        ON interviews (user_id, interview_date, interview_time)
        """
    )
    op.execute(
        """
        CREATE INDEX IF NOT EXISTS idx_interviews_reminder_check
        ON interviews (interview_date, reminder_24h_sent, reminder_3h_sent)
        """
    )

    op.execute(
        """
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
        """
    )
    op.execute(
        """
        CREATE TRIGGER update_interviews_updated_at
        BEFORE UPDATE ON interviews
        FOR EACH ROW
        EXECUTE FUNCTION update_updated_at_column()
        """
    )


def downgrade() -> None:
    """Drop interviews table and trigger function."""
    op.execute("DROP TRIGGER IF EXISTS update_interviews_updated_at ON interviews")
    op.execute("DROP TABLE IF EXISTS interviews")
    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")
