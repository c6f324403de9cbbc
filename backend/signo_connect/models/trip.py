"""Trip ORM — a logged journey between origin and destination.

Invariants:
    - trip_id is unique and follows the "TR-#####" naming series
    - driver_id / transporter_id are text: local ids and Frappe names both appear
    - status is a TripStatus value; started_on / ended_on follow status transitions
    - pending_amount = trip_cost - paid_amount unless given explicitly, never negative

Design Decisions:
    - Money as Float: amounts are display values in INR, no ledger arithmetic here
    - distance_km / rating nullable: filled in after completion, feed trip stats
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, Float, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from signo_connect.db.base import Base


class Trip(Base):
    __tablename__ = "trips"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    trip_id: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)
    vehicle_id: Mapped[str] = mapped_column(String(50), nullable=False)
    vehicle_type: Mapped[str | None] = mapped_column(Text, nullable=True)
    driver_id: Mapped[str] = mapped_column(
        String(50), nullable=False, index=True,
    )
    driver_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    driver_phone_number: Mapped[str | None] = mapped_column(Text, nullable=True)
    transporter_id: Mapped[str] = mapped_column(
        String(50), nullable=False, index=True,
    )
    transporter_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    origin: Mapped[str] = mapped_column(Text, nullable=False)
    destination: Mapped[str] = mapped_column(Text, nullable=False)
    eta: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    trip_cost: Mapped[float] = mapped_column(Float, nullable=False)
    paid_amount: Mapped[float] = mapped_column(
        Float, nullable=False, default=0.0,
    )
    pending_amount: Mapped[float | None] = mapped_column(Float, nullable=True)
    distance_km: Mapped[float | None] = mapped_column(Float, nullable=True)
    rating: Mapped[float | None] = mapped_column(Float, nullable=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="upcoming",
    )
    started_by: Mapped[str | None] = mapped_column(String(20), nullable=True)
    started_on: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    ended_on: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    odo_start: Mapped[str | None] = mapped_column(Text, nullable=True)
    odo_end: Mapped[str | None] = mapped_column(Text, nullable=True)
    share_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    created_on: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
