"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Attribute names equal column names (storage records are keyed by column name)

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all,
      alembic autogenerate, or MemoryStorage table discovery
"""

from signo_connect.models.user import User  # noqa: F401
from signo_connect.models.driver import Driver  # noqa: F401
from signo_connect.models.fleet_owner import FleetOwner  # noqa: F401
from signo_connect.models.job import Job  # noqa: F401
from signo_connect.models.otp_verification import OtpVerification  # noqa: F401
from signo_connect.models.job_application import JobApplication  # noqa: F401
from signo_connect.models.document import Document  # noqa: F401
from signo_connect.models.vehicle_type import VehicleType  # noqa: F401
from signo_connect.models.vehicle import Vehicle  # noqa: F401
from signo_connect.models.vehicle_checklist import VehicleChecklist  # noqa: F401
from signo_connect.models.trip import Trip  # noqa: F401
from signo_connect.models.notification import Notification  # noqa: F401
from signo_connect.models.referral import Referral  # noqa: F401
from signo_connect.models.driver_assessment import DriverAssessment  # noqa: F401
from signo_connect.models.fuel_pump import FuelPump  # noqa: F401
from signo_connect.models.toll import Toll  # noqa: F401
from signo_connect.models.frappe_driver import FrappeDriver  # noqa: F401
