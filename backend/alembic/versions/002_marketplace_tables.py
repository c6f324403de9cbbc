"""Marketplace tables — applications, documents, vehicles, trips, engagement, navigation, Frappe mirror.

Revision ID: 002_marketplace
Revises: 001_core
Create Date: 2025-03-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "002_marketplace"
down_revision: Union[str, None] = "001_core"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at(name: str = "created_at") -> sa.Column:
    return sa.Column(name, sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now())


def upgrade() -> None:
    op.create_table(
        "job_applications",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("job_id", sa.Integer, sa.ForeignKey("jobs.id", ondelete="CASCADE"), nullable=False),
        sa.Column("driver_id", sa.Integer, sa.ForeignKey("drivers.id", ondelete="CASCADE"), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        _created_at("applied_on"),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.UniqueConstraint("job_id", "driver_id", name="uq_job_applications_job_driver"),
    )
    op.create_index("ix_job_applications_job_id", "job_applications", ["job_id"])
    op.create_index("ix_job_applications_driver_id", "job_applications", ["driver_id"])

    op.create_table(
        "documents",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("document_id", sa.String(100), nullable=False, unique=True),
        sa.Column("user_id", sa.Integer, sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("type", sa.String(40), nullable=False),
        sa.Column("document_number", sa.Text, nullable=True),
        sa.Column("front_image", sa.Text, nullable=True),
        sa.Column("back_image", sa.Text, nullable=True),
        sa.Column("is_verified", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("verified_by", sa.Text, nullable=True),
        sa.Column("verified_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("expiry_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("remarks", sa.Text, nullable=True),
        _created_at(),
    )
    op.create_index("ix_documents_user_id", "documents", ["user_id"])

    op.create_table(
        "vehicle_types",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("vehicle_type", sa.String(100), nullable=False, unique=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default="true"),
        _created_at(),
    )

    op.create_table(
        "vehicles",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("registration_number", sa.String(20), nullable=False, unique=True),
        sa.Column("transporter_id", sa.Integer, nullable=False),
        sa.Column("vehicle_type", sa.Text, nullable=False),
        sa.Column("make", sa.Text, nullable=False),
        sa.Column("model", sa.Text, nullable=False),
        sa.Column("year", sa.Integer, nullable=True),
        sa.Column("capacity_tons", sa.Float, nullable=True),
        sa.Column("insurance_status", sa.Text, nullable=True),
        sa.Column("last_service_date", sa.DateTime(timezone=True), nullable=True),
        _created_at(),
    )
    op.create_index("ix_vehicles_transporter_id", "vehicles", ["transporter_id"])

    op.create_table(
        "vehicle_checklists",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("item", sa.Text, nullable=False),
        sa.Column("is_available", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("remarks", sa.Text, nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("vehicle_id", sa.String(50), nullable=True),
        sa.Column("trip_id", sa.String(50), nullable=True),
        sa.Column("driver_id", sa.Integer, nullable=True),
        sa.Column("date", sa.DateTime(timezone=True), nullable=True),
        _created_at(),
    )
    op.create_index("ix_vehicle_checklists_vehicle_id", "vehicle_checklists", ["vehicle_id"])

    op.create_table(
        "trips",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("trip_id", sa.String(20), nullable=False, unique=True),
        sa.Column("vehicle_id", sa.String(50), nullable=False),
        sa.Column("vehicle_type", sa.Text, nullable=True),
        sa.Column("driver_id", sa.String(50), nullable=False),
        sa.Column("driver_name", sa.Text, nullable=True),
        sa.Column("driver_phone_number", sa.Text, nullable=True),
        sa.Column("transporter_id", sa.String(50), nullable=False),
        sa.Column("transporter_name", sa.Text, nullable=True),
        sa.Column("origin", sa.Text, nullable=False),
        sa.Column("destination", sa.Text, nullable=False),
        sa.Column("eta", sa.DateTime(timezone=True), nullable=True),
        sa.Column("trip_cost", sa.Float, nullable=False),
        sa.Column("paid_amount", sa.Float, nullable=False, server_default="0"),
        sa.Column("pending_amount", sa.Float, nullable=True),
        sa.Column("distance_km", sa.Float, nullable=True),
        sa.Column("rating", sa.Float, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="upcoming"),
        sa.Column("started_by", sa.String(20), nullable=True),
        sa.Column("started_on", sa.DateTime(timezone=True), nullable=True),
        sa.Column("ended_on", sa.DateTime(timezone=True), nullable=True),
        sa.Column("odo_start", sa.Text, nullable=True),
        sa.Column("odo_end", sa.Text, nullable=True),
        sa.Column("share_text", sa.Text, nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default="true"),
        _created_at("created_on"),
    )
    op.create_index("ix_trips_driver_id", "trips", ["driver_id"])
    op.create_index("ix_trips_transporter_id", "trips", ["transporter_id"])

    op.create_table(
        "notifications",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, nullable=False),
        sa.Column("user_type", sa.String(20), nullable=False),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("type", sa.String(20), nullable=False),
        sa.Column("read", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("action_url", sa.Text, nullable=True),
        _created_at(),
    )
    op.create_index("ix_notifications_user_id", "notifications", ["user_id"])

    op.create_table(
        "referrals",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("referrer_id", sa.Integer, nullable=False),
        sa.Column("referred_phone_number", sa.String(20), nullable=False),
        sa.Column("referred_name", sa.Text, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("reward", sa.Text, nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        _created_at(),
    )
    op.create_index("ix_referrals_referrer_id", "referrals", ["referrer_id"])

    op.create_table(
        "driver_assessments",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("driver_id", sa.Integer, nullable=False),
        sa.Column("assessment_type", sa.Text, nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("score", sa.Integer, nullable=True),
        sa.Column("feedback_notes", sa.Text, nullable=True),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        _created_at(),
    )
    op.create_index("ix_driver_assessments_driver_id", "driver_assessments", ["driver_id"])

    op.create_table(
        "fuel_pumps",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("address", sa.Text, nullable=False),
        sa.Column("latitude", sa.Float, nullable=False),
        sa.Column("longitude", sa.Float, nullable=False),
        sa.Column("amenities", sa.JSON, nullable=False),
        sa.Column("fuel_types", sa.JSON, nullable=False),
        sa.Column("is_open_24_hours", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("rating", sa.Float, nullable=True),
        _created_at(),
    )

    op.create_table(
        "tolls",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text, nullable=False),
        sa.Column("latitude", sa.Float, nullable=False),
        sa.Column("longitude", sa.Float, nullable=False),
        sa.Column("fee_amount", sa.Float, nullable=True),
        sa.Column("highway", sa.Text, nullable=True),
        sa.Column("payment_methods", sa.JSON, nullable=False),
        _created_at(),
    )

    op.create_table(
        "frappe_drivers",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("doc_name", sa.String(20), nullable=False, unique=True),
        sa.Column("name1", sa.Text, nullable=False),
        sa.Column("phone_number", sa.String(20), nullable=False, unique=True),
        sa.Column("email", sa.Text, nullable=True),
        sa.Column("category", sa.Text, nullable=False),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default="true"),
        sa.Column("emergency_contact_number", sa.Text, nullable=True),
        sa.Column("address", sa.Text, nullable=True),
        sa.Column("experience", sa.Text, nullable=True),
        sa.Column("remarks", sa.Text, nullable=True),
        _created_at("creation"),
        _created_at("modified"),
    )


def downgrade() -> None:
    op.drop_table("frappe_drivers")
    op.drop_table("tolls")
    op.drop_table("fuel_pumps")
    op.drop_index("ix_driver_assessments_driver_id", table_name="driver_assessments")
    op.drop_table("driver_assessments")
    op.drop_index("ix_referrals_referrer_id", table_name="referrals")
    op.drop_table("referrals")
    op.drop_index("ix_notifications_user_id", table_name="notifications")
    op.drop_table("notifications")
    op.drop_index("ix_trips_transporter_id", table_name="trips")
    op.drop_index("ix_trips_driver_id", table_name="trips")
    op.drop_table("trips")
    op.drop_index("ix_vehicle_checklists_vehicle_id", table_name="vehicle_checklists")
    op.drop_table("vehicle_checklists")
    op.drop_index("ix_vehicles_transporter_id", table_name="vehicles")
    op.drop_table("vehicles")
    op.drop_table("vehicle_types")
    op.drop_index("ix_documents_user_id", table_name="documents")
    op.drop_table("documents")
    op.drop_index("ix_job_applications_driver_id", table_name="job_applications")
    op.drop_index("ix_job_applications_job_id", table_name="job_applications")
    op.drop_table("job_applications")
