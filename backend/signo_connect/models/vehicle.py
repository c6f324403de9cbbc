"""Vehicle ORM — a truck registered to a transporter.

Invariants:
    - registration_number is unique
    - transporter_id is the owning fleet owner's user id
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, Float, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from signo_connect.db.base import Base


class Vehicle(Base):
    __tablename__ = "vehicles"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    registration_number: Mapped[str] = mapped_column(
        String(20), nullable=False, unique=True,
    )
    transporter_id: Mapped[int] = mapped_column(
        Integer, nullable=False, index=True,
    )
    vehicle_type: Mapped[str] = mapped_column(Text, nullable=False)
    make: Mapped[str] = mapped_column(Text, nullable=False)
    model: Mapped[str] = mapped_column(Text, nullable=False)
    year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    capacity_tons: Mapped[float | None] = mapped_column(Float, nullable=True)
    insurance_status: Mapped[str | None] = mapped_column(Text, nullable=True)
    last_service_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
