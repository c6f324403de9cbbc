"""Vehicle Schemas — transporter vehicles and inspection checklists."""

from datetime import datetime

from pydantic import Field, field_validator

from signo_connect.schemas.base import CamelModel


class VehicleCreate(CamelModel):
    registration_number: str = Field(min_length=1, max_length=20)
    transporter_id: int
    vehicle_type: str = Field(min_length=1)
    make: str = Field(min_length=1)
    model: str = Field(min_length=1)
    year: int | None = Field(None, ge=1950, le=2100)
    capacity_tons: float | None = Field(None, ge=0)
    insurance_status: str | None = None
    last_service_date: datetime | None = None


class ChecklistCreate(CamelModel):
    item: str = Field(min_length=1)
    is_available: bool = False
    remarks: str | None = None
    description: str | None = None
    vehicle_id: str | None = None
    trip_id: str | None = None
    driver_id: int | None = None
    date: datetime | None = None

    @field_validator("vehicle_id", "trip_id", mode="before")
    @classmethod
    def ids_as_text(cls, v: object) -> object:
        """Vehicle and trip ids arrive as numbers or names; stored as text."""
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class ChecklistUpdate(CamelModel):
    item: str | None = Field(None, min_length=1)
    is_available: bool | None = None
    remarks: str | None = None
    description: str | None = None
    date: datetime | None = None
