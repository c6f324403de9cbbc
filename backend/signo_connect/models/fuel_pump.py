"""Fuel Pump ORM — geolocated fuel station shown along a route."""

from datetime import datetime, timezone

from sqlalchemy import Text, Integer, Float, Boolean, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from signo_connect.db.base import Base


class FuelPump(Base):
    __tablename__ = "fuel_pumps"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    amenities: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    fuel_types: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    is_open_24_hours: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    rating: Mapped[float | None] = mapped_column(Float, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
