"""Job Application ORM — a driver applying to a local job.

Invariants:
    - (job_id, driver_id) is unique: a driver applies to a job once
    - driver_id references drivers.id (the driver profile, not the user)
    - status is an ApplicationStatus value, default "pending"
    - updated_at is stamped on every update

Design Decisions:
    - expected_salary / preferred_joining_date / additional_notes added by
      migration 004 (nullable so existing rows stay valid)
"""

from datetime import datetime, timezone

from sqlalchemy import (
    String, Text, Integer, Float, DateTime, ForeignKey, UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from signo_connect.db.base import Base


class JobApplication(Base):
    __tablename__ = "job_applications"
    __table_args__ = (
        UniqueConstraint("job_id", "driver_id", name="uq_job_applications_job_driver"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    job_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("jobs.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    driver_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("drivers.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="pending",
    )
    expected_salary: Mapped[float | None] = mapped_column(Float, nullable=True)
    preferred_joining_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    additional_notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    applied_on: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
