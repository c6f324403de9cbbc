"""Frappe Driver ORM — local mirror of driver records managed by admins.

Invariants:
    - doc_name follows Frappe naming: "SIG" + 5-digit sequence, unique
    - phone_number is unique across mirror records
    - modified is stamped on every update

Design Decisions:
    - Field names match the Frappe Drivers doctype (name1, category) so rows can be
      pushed to signodrive.com unchanged
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from signo_connect.db.base import Base


class FrappeDriver(Base):
    __tablename__ = "frappe_drivers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    doc_name: Mapped[str] = mapped_column(String(20), nullable=False, unique=True)
    name1: Mapped[str] = mapped_column(Text, nullable=False)
    phone_number: Mapped[str] = mapped_column(
        String(20), nullable=False, unique=True,
    )
    email: Mapped[str | None] = mapped_column(Text, nullable=True)
    category: Mapped[str] = mapped_column(Text, nullable=False)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    emergency_contact_number: Mapped[str | None] = mapped_column(Text, nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    experience: Mapped[str | None] = mapped_column(Text, nullable=True)
    remarks: Mapped[str | None] = mapped_column(Text, nullable=True)
    creation: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    modified: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
