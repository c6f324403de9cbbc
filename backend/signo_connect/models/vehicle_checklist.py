"""Vehicle Checklist ORM — pre-trip inspection item for a vehicle.

Invariants:
    - vehicle_id / trip_id are stored as text (local ids and Frappe names both appear)
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from signo_connect.db.base import Base


class VehicleChecklist(Base):
    __tablename__ = "vehicle_checklists"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    item: Mapped[str] = mapped_column(Text, nullable=False)
    is_available: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    remarks: Mapped[str | None] = mapped_column(Text, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    vehicle_id: Mapped[str | None] = mapped_column(
        String(50), nullable=True, index=True,
    )
    trip_id: Mapped[str | None] = mapped_column(String(50), nullable=True)
    driver_id: Mapped[int | None] = mapped_column(Integer, nullable=True)
    date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
