"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, DriverId, JobId wrap ints — row ids are integers in both storage backends
    - All valid states encoded as Enums — no raw string matching
    - Enum values are the exact strings persisted and exchanged with clients

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
DriverId = NewType("DriverId", int)
JobId = NewType("JobId", int)
DocName = NewType("DocName", str)        # Frappe record name, e.g. "SIG00042"


# ─── Enums ───────────────────────────────────────────────────────

class UserType(str, Enum):
    """Account roles — a transporter is a fleet owner on the Frappe side."""
    DRIVER = "driver"
    FLEET_OWNER = "fleet_owner"


class DocType(str, Enum):
    """Uploadable document kinds."""
    DRIVING_LICENSE = "driving_license"
    AADHAR_CARD = "aadhar_card"
    PAN_CARD = "pan_card"
    BANK_DETAILS = "bank_details"
    VEHICLE_REGISTRATION = "vehicle_registration"
    PROFILE_PIC = "profile_pic"
    OTHER = "other"


class VerificationStatus(str, Enum):
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"


class ApplicationStatus(str, Enum):
    """Job application lifecycle. Only PENDING applications may be withdrawn."""
    PENDING = "pending"
    REVIEWED = "reviewed"
    SHORTLISTED = "shortlisted"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    HIRED = "hired"


class TripStatus(str, Enum):
    UPCOMING = "upcoming"
    WAITING = "waiting"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TripStarter(str, Enum):
    DRIVER = "Driver"
    TRANSPORTER = "Transporter"


class NotificationType(str, Enum):
    JOB = "job"
    SYSTEM = "system"
    PAYMENT = "payment"
    TRIP = "trip"


class ReferralStatus(str, Enum):
    PENDING = "pending"
    REGISTERED = "registered"
    COMPLETED = "completed"


class AssessmentStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"


class DirectoryQueryType(str, Enum):
    """Fields the local drivers directory can be searched on."""
    NAME = "name"
    LOCATION = "location"
    VEHICLE_TYPE = "vehicle_type"
    AVAILABILITY = "availability"
