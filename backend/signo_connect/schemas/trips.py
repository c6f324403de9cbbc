"""Trip Schemas — trip logging bodies.

Invariants:
    - tripCost and paidAmount are non-negative
    - status is a TripStatus value; startedBy a TripStarter value
    - driverId / transporterId / vehicleId accept numbers and store them as text
"""

from datetime import datetime

from pydantic import Field, field_validator

from signo_connect.core.domain_types import TripStarter, TripStatus
from signo_connect.schemas.base import CamelModel


def _as_text(v: object) -> object:
    if isinstance(v, int) and not isinstance(v, bool):
        return str(v)
    return v


class TripCreate(CamelModel):
    vehicle_id: str = Field(min_length=1)
    vehicle_type: str | None = None
    driver_id: str = Field(min_length=1)
    driver_name: str | None = None
    driver_phone_number: str | None = None
    transporter_id: str = Field(min_length=1)
    transporter_name: str | None = None
    origin: str = Field(min_length=1)
    destination: str = Field(min_length=1)
    eta: datetime | None = None
    trip_cost: float = Field(ge=0)
    paid_amount: float = Field(0, ge=0)
    pending_amount: float | None = Field(None, ge=0)
    distance_km: float | None = Field(None, ge=0)
    rating: float | None = Field(None, ge=0, le=5)
    status: TripStatus = TripStatus.UPCOMING
    started_by: TripStarter | None = None
    started_on: datetime | None = None
    ended_on: datetime | None = None
    odo_start: str | None = None
    odo_end: str | None = None
    share_text: str | None = None

    @field_validator("vehicle_id", "driver_id", "transporter_id", mode="before")
    @classmethod
    def ids_as_text(cls, v: object) -> object:
        return _as_text(v)


class TripUpdate(CamelModel):
    vehicle_id: str | None = None
    vehicle_type: str | None = None
    driver_name: str | None = None
    driver_phone_number: str | None = None
    transporter_name: str | None = None
    origin: str | None = None
    destination: str | None = None
    eta: datetime | None = None
    trip_cost: float | None = Field(None, ge=0)
    paid_amount: float | None = Field(None, ge=0)
    pending_amount: float | None = Field(None, ge=0)
    distance_km: float | None = Field(None, ge=0)
    rating: float | None = Field(None, ge=0, le=5)
    status: TripStatus | None = None
    started_by: TripStarter | None = None
    started_on: datetime | None = None
    ended_on: datetime | None = None
    odo_start: str | None = None
    odo_end: str | None = None
    share_text: str | None = None
    is_active: bool | None = None

    @field_validator("vehicle_id", mode="before")
    @classmethod
    def ids_as_text(cls, v: object) -> object:
        return _as_text(v)
