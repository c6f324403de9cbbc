"""Frappe Schemas — driver mirror records and transporter operations on signodrive.com.

Invariants:
    - Frappe driver phoneNumber: at least 10 chars
    - Posted jobs need at least one non-blank requirement (sent as questions)
    - Status updates are lower-case job states; capitalised before leaving the API
"""

from pydantic import EmailStr, Field, field_validator

from signo_connect.schemas.base import CamelModel


class FrappeDriverCreate(CamelModel):
    name1: str = Field(min_length=1)
    phone_number: str = Field(min_length=10, max_length=15)
    email: EmailStr | None = None
    category: str = Field(min_length=1)
    is_active: bool = True
    emergency_contact_number: str | None = None
    address: str | None = None
    experience: str | None = None
    remarks: str | None = None


class FrappeDriverUpdate(CamelModel):
    name1: str | None = Field(None, min_length=1)
    phone_number: str | None = Field(None, min_length=10, max_length=15)
    email: EmailStr | None = None
    category: str | None = Field(None, min_length=1)
    is_active: bool | None = None
    emergency_contact_number: str | None = None
    address: str | None = None
    experience: str | None = None
    remarks: str | None = None


class TransporterJobCreate(CamelModel):
    transporter: str = Field(min_length=1)
    title: str = Field(min_length=1, max_length=200)
    description: str = ""
    type_of_job: str = "Full-time"
    salary: str = Field(min_length=1)
    city: str = Field(min_length=1)
    no_of_openings: int = Field(1, ge=1)
    requirements: list[str]

    @field_validator("requirements")
    @classmethod
    def drop_blank_requirements(cls, v: list[str]) -> list[str]:
        cleaned = [r.strip() for r in v if r and r.strip()]
        if not cleaned:
            raise ValueError("at least one requirement is needed")
        return cleaned


class TransporterJobEdit(TransporterJobCreate):
    """Full replacement of a posted job's content."""


class JobStatusUpdate(CamelModel):
    feed_id: str = Field(min_length=1)
    status: str = Field(pattern=r"^(pending|approved|active|paused|filled|expired)$")


class TransporterRegister(CamelModel):
    full_name: str = Field(min_length=1)
    country_code: str = "+91"
    phone_number: str = Field(min_length=6, max_length=15)
    company_name: str = Field(min_length=1)
    email: EmailStr | None = None
    gst_number: str | None = None
    address: str | None = None
    fleet_size: int | None = Field(None, ge=0)


class TransporterProfileUpdate(CamelModel):
    name1: str | None = None
    company_name: str | None = None
    email: EmailStr | None = None
    address: str | None = None
    gst: str | None = None
    pan: str | None = None
    fleet_size: int | None = Field(None, ge=0)
    logo_pic: str | None = None
