"""Account Schemas — registration, OTP verification and profile bodies.

Invariants:
    - phoneNumber: 10-15 chars, stripped
    - otp: exactly 6 chars
    - userType is a UserType value
    - Profile bodies carry only the fields a client may set (no ids other than userId)
"""

from pydantic import EmailStr, Field, field_validator

from signo_connect.core.domain_types import UserType
from signo_connect.schemas.base import CamelModel


class RegisterRequest(CamelModel):
    full_name: str = Field(min_length=1, max_length=200)
    phone_number: str = Field(min_length=10, max_length=15)
    email: EmailStr | None = None
    user_type: UserType
    language: str = Field("en", max_length=10)

    @field_validator("full_name", "phone_number")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("value cannot be empty or whitespace")
        return v


class VerifyOtpRequest(CamelModel):
    phone_number: str = Field(min_length=10, max_length=15)
    otp: str = Field(min_length=6, max_length=6)


class DriverProfileRequest(CamelModel):
    """POST /api/driver-profile — missing optional fields get profile defaults."""
    user_id: int
    email: EmailStr | None = None
    preferred_locations: list[str] = Field(default_factory=list)
    driving_license: str | None = None
    identity_proof: str | None = None
    experience: str | None = None
    vehicle_types: list[str] = Field(default_factory=list)
    profile_image: str | None = None
    about: str | None = None
    location: str | None = None
    availability: str | None = None
    skills: list[str] | None = None


class FleetOwnerProfileRequest(CamelModel):
    user_id: int
    email: EmailStr | None = None
    company_name: str | None = None
    fleet_size: str | None = None
    preferred_locations: list[str] = Field(default_factory=list)
    registration_doc: str | None = None
    profile_image: str | None = None
    about: str | None = None
    location: str | None = None
    contact_email: str | None = None
    business_type: str | None = None
    reg_number: str | None = None


class DriverProfileUpdate(CamelModel):
    """PUT /api/resource/drivers/profile — partial update of user + driver fields."""
    full_name: str | None = Field(None, min_length=1, max_length=200)
    phone_number: str | None = Field(None, min_length=10, max_length=15)
    preferred_locations: list[str] | None = None
    driving_license: str | None = None
    identity_proof: str | None = None
    experience: str | None = None
    vehicle_types: list[str] | None = None
    profile_image: str | None = None
    about: str | None = None
    location: str | None = None
    availability: str | None = None
    skills: list[str] | None = None
