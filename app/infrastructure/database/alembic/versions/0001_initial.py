"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19 00:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

DEFAULT_SETTINGS = [
    {"key": "rsvp_open", "value": "true"},
    {"key": "activity_submissions_open", "value": "true"},
    {"key": "event_date_start", "value": ""},
    {"key": "event_date_end", "value": ""},
    {"key": "location", "value": ""},
]


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now()
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now()
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "attendees",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("dietary_restrictions", sa.Text(), nullable=True),
        sa.Column("plus_one", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("arrival_time", sa.String(255), nullable=True),
        sa.Column("departure_time", sa.String(255), nullable=True),
        sa.Column("excited_about", sa.Text(), nullable=True),
        sa.Column(
            "payment_status", sa.String(32), nullable=False, server_default="pending"
        ),
        *_timestamps(),
    )
    op.create_index("ix_attendees_email", "attendees", ["email"], unique=True)

    op.create_table(
        "activities",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("host_name", sa.String(255), nullable=False),
        sa.Column("host_email", sa.String(255), nullable=True),
        sa.Column("duration", sa.Integer(), nullable=True),
        sa.Column("equipment_needed", sa.Text(), nullable=True),
        sa.Column("capacity", sa.Integer(), nullable=True),
        sa.Column("time_preference", sa.String(500), nullable=True),
        sa.Column("activity_type", sa.String(100), nullable=True),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("status", sa.String(32), nullable=False, server_default="pending"),
        sa.Column("scheduled_start", sa.String(64), nullable=True),
        sa.Column("scheduled_end", sa.String(64), nullable=True),
        sa.Column("location", sa.String(255), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_activities_status", "activities", ["status"])

    op.create_table(
        "announcements",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("message", sa.String(500), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )
    op.create_index("ix_announcements_active", "announcements", ["active"])

    settings_table = op.create_table(
        "settings",
        sa.Column("key", sa.String(100), primary_key=True),
        sa.Column("value", sa.Text(), nullable=False),
    )
    op.bulk_insert(settings_table, DEFAULT_SETTINGS)

    op.create_table(
        "login_attempts",
        sa.Column("ip_address", sa.String(64), primary_key=True),
        sa.Column("attempts", sa.Integer(), nullable=False),
        sa.Column("last_attempt", sa.BigInteger(), nullable=False),
        sa.Column("locked_until", sa.BigInteger(), nullable=True),
    )
    op.create_index(
        "ix_login_attempts_locked_until", "login_attempts", ["locked_until"]
    )


def downgrade() -> None:
    op.drop_index("ix_login_attempts_locked_until", table_name="login_attempts")
    op.drop_table("login_attempts")
    op.drop_table("settings")
    op.drop_index("ix_announcements_active", table_name="announcements")
    op.drop_table("announcements")
    op.drop_index("ix_activities_status", table_name="activities")
    op.drop_table("activities")
    op.drop_index("ix_attendees_email", table_name="attendees")
    op.drop_table("attendees")
