"""Job Schemas — local job postings and driver applications."""

from datetime import datetime

from pydantic import Field

from signo_connect.core.domain_types import ApplicationStatus
from signo_connect.schemas.base import CamelModel


class JobCreate(CamelModel):
    fleet_owner_id: int
    title: str = Field(min_length=1, max_length=200)
    location: str = Field(min_length=1, max_length=200)
    salary: str | None = None
    description: str | None = None
    requirements: list[str] = Field(default_factory=list)


class JobUpdate(CamelModel):
    title: str | None = Field(None, min_length=1, max_length=200)
    location: str | None = Field(None, min_length=1, max_length=200)
    salary: str | None = None
    description: str | None = None
    requirements: list[str] | None = None
    is_active: bool | None = None


class JobApplicationCreate(CamelModel):
    job_id: int
    driver_id: int
    status: ApplicationStatus = ApplicationStatus.PENDING
    expected_salary: float | None = Field(None, ge=0)
    preferred_joining_date: datetime | None = None
    additional_notes: str | None = Field(None, max_length=2000)


class JobApplicationUpdate(CamelModel):
    status: ApplicationStatus | None = None
    expected_salary: float | None = Field(None, ge=0)
    additional_notes: str | None = Field(None, max_length=2000)
