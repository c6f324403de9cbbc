"""Fleet Owner ORM — company profile for users posting jobs."""

from sqlalchemy import Text, Integer, JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from signo_connect.db.base import Base


class FleetOwner(Base):
    __tablename__ = "fleet_owners"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False, unique=True,
    )
    company_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    fleet_size: Mapped[str | None] = mapped_column(Text, nullable=True)
    preferred_locations: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    registration_doc: Mapped[str | None] = mapped_column(Text, nullable=True)
    profile_image: Mapped[str | None] = mapped_column(Text, nullable=True)
    about: Mapped[str | None] = mapped_column(Text, nullable=True)
    location: Mapped[str | None] = mapped_column(Text, nullable=True)
    contact_email: Mapped[str | None] = mapped_column(Text, nullable=True)
    business_type: Mapped[str | None] = mapped_column(Text, nullable=True)
    reg_number: Mapped[str | None] = mapped_column(Text, nullable=True)
