"""Core tables — users, drivers, fleet owners, jobs, OTP verifications.

Revision ID: 001_core
Revises: None
Create Date: 2025-03-04

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_core"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("full_name", sa.Text, nullable=False),
        sa.Column("phone_number", sa.String(20), nullable=False, unique=True),
        sa.Column("email", sa.Text, nullable=True),
        sa.Column("user_type", sa.String(20), nullable=False),
        sa.Column("language", sa.String(10), nullable=False, server_default="en"),
        sa.Column("profile_completed", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        "drivers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True),
        sa.Column("preferred_locations", sa.JSON, nullable=False),
        sa.Column("driving_license", sa.Text, nullable=True),
        sa.Column("identity_proof", sa.Text, nullable=True),
        sa.Column("experience", sa.Text, nullable=True),
        sa.Column("vehicle_types", sa.JSON, nullable=False),
    )

    op.create_table(
        "fleet_owners",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False, unique=True),
        sa.Column("company_name", sa.Text, nullable=True),
        sa.Column("fleet_size", sa.Text, nullable=True),
        sa.Column("preferred_locations", sa.JSON, nullable=False),
        sa.Column("registration_doc", sa.Text, nullable=True),
    )

    op.create_table(
        "jobs",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("fleet_owner_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("location", sa.Text, nullable=False),
        sa.Column("salary", sa.Text, nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("requirements", sa.JSON, nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default="true"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_jobs_fleet_owner_id", "jobs", ["fleet_owner_id"])

    op.create_table(
        "otp_verifications",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("phone_number", sa.String(20), nullable=False),
        sa.Column("otp", sa.String(6), nullable=False),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("verified", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    )
    op.create_index("ix_otp_verifications_phone_number", "otp_verifications", ["phone_number"])


def downgrade() -> None:
    op.drop_index("ix_otp_verifications_phone_number", table_name="otp_verifications")
    op.drop_table("otp_verifications")
    op.drop_index("ix_jobs_fleet_owner_id", table_name="jobs")
    op.drop_table("jobs")
    op.drop_table("fleet_owners")
    op.drop_table("drivers")
    op.drop_table("users")
