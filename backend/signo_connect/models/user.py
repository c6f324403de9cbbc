"""User ORM — one row per phone-verified account.

Invariants:
    - phone_number is unique across all users (registration conflict key)
    - user_type is a UserType value: driver | fleet_owner
    - profile_completed flips to True once the role profile is saved

Design Decisions:
    - Role-specific data lives in drivers / fleet_owners keyed by user_id,
      so a user row never changes shape with its role
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from signo_connect.db.base import Base


class User(Base):
    """Account identity shared by drivers and fleet owners."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column(Text, nullable=False)
    phone_number: Mapped[str] = mapped_column(
        String(20), nullable=False, unique=True,
    )
    email: Mapped[str | None] = mapped_column(Text, nullable=True)
    user_type: Mapped[str] = mapped_column(String(20), nullable=False)
    language: Mapped[str] = mapped_column(
        String(10), nullable=False, default="en",
    )
    profile_completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
