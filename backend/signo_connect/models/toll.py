"""Toll ORM — geolocated toll plaza with its fee."""

from datetime import datetime, timezone

from sqlalchemy import Text, Integer, Float, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from signo_connect.db.base import Base


class Toll(Base):
    __tablename__ = "tolls"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)
    fee_amount: Mapped[float | None] = mapped_column(Float, nullable=True)
    highway: Mapped[str | None] = mapped_column(Text, nullable=True)
    payment_methods: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
