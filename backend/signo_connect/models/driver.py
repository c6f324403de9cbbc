"""Driver ORM — driver-specific profile, one per driver user.

Invariants:
    - user_id references users.id and is unique (one profile per user)
    - List fields (preferred_locations, vehicle_types, skills) are never NULL

Design Decisions:
    - JSON columns for string lists: same storage on PostgreSQL and SQLite
"""

from sqlalchemy import Text, Integer, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from signo_connect.db.base import Base


class Driver(Base):
    __tablename__ = "drivers"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, unique=True,
    )
    preferred_locations: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    driving_license: Mapped[str | None] = mapped_column(Text, nullable=True)
    identity_proof: Mapped[str | None] = mapped_column(Text, nullable=True)
    experience: Mapped[str | None] = mapped_column(Text, nullable=True)
    vehicle_types: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    profile_image: Mapped[str | None] = mapped_column(Text, nullable=True)
    about: Mapped[str | None] = mapped_column(Text, nullable=True)
    location: Mapped[str | None] = mapped_column(Text, nullable=True)
    availability: Mapped[str | None] = mapped_column(Text, nullable=True)
    skills: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
