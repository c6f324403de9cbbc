"""Document Schemas — document uploads, verification and vehicle types."""

from datetime import datetime

from pydantic import Field

from signo_connect.core.domain_types import DocType
from signo_connect.schemas.base import CamelModel


class DocumentCreate(CamelModel):
    document_id: str = Field(min_length=1, max_length=100)
    user_id: int
    type: DocType
    document_number: str | None = None
    front_image: str | None = None
    back_image: str | None = None
    expiry_date: datetime | None = None
    date: datetime | None = None
    remarks: str | None = None


class DocumentUpdate(CamelModel):
    type: DocType | None = None
    document_number: str | None = None
    front_image: str | None = None
    back_image: str | None = None
    expiry_date: datetime | None = None
    date: datetime | None = None
    remarks: str | None = None


class DocumentVerify(CamelModel):
    verified_by: str = Field(min_length=1)
    is_verified: bool = True


class VehicleTypeCreate(CamelModel):
    vehicle_type: str = Field(min_length=1, max_length=100)
    is_active: bool = True
