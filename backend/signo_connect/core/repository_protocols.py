"""Boundary Protocols — the storage contract between routes/services and persistence.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Every record crosses the boundary as a plain dict keyed by column name
    - Lookups that miss return None (never raise); deletes return bool
    - List results are ordered by id ascending unless documented otherwise

Design Decisions:
    - Protocol over ABC: structural subtyping, MemoryStorage and DatabaseStorage
      satisfy it without inheriting from core
    - Async in Protocol: implementations do IO, so callers await every method
    - One wide Storage protocol (not one per table): routes depend on a single
      injectable, and both backends are exercised by the same contract tests
"""

from typing import Protocol


class Storage(Protocol):
    """Contract for all marketplace persistence — implemented by infrastructure."""

    # Users
    async def get_user(self, user_id: int) -> dict | None: ...
    async def get_user_by_phone(self, phone_number: str) -> dict | None: ...
    async def create_user(self, data: dict) -> dict: ...
    async def update_user(self, user_id: int, data: dict) -> dict | None: ...
    async def list_users(self, user_type: str | None = None) -> list[dict]: ...

    # Drivers (keyed by user id unless the name says otherwise)
    async def get_driver(self, user_id: int) -> dict | None: ...
    async def get_driver_by_id(self, driver_id: int) -> dict | None: ...
    async def create_driver(self, data: dict) -> dict: ...
    async def update_driver(self, user_id: int, data: dict) -> dict | None: ...
    async def list_drivers(self) -> list[dict]: ...

    # Fleet owners (keyed by user id)
    async def get_fleet_owner(self, user_id: int) -> dict | None: ...
    async def create_fleet_owner(self, data: dict) -> dict: ...
    async def update_fleet_owner(self, user_id: int, data: dict) -> dict | None: ...

    # Jobs
    async def get_job(self, job_id: int) -> dict | None: ...
    async def get_jobs_by_fleet_owner(self, fleet_owner_id: int) -> list[dict]: ...
    async def get_jobs_by_location(self, location: str) -> list[dict]: ...
    async def create_job(self, data: dict) -> dict: ...
    async def update_job(self, job_id: int, data: dict) -> dict | None: ...

    # OTP
    async def create_otp_verification(self, data: dict) -> dict: ...
    async def get_otp_verification(self, phone_number: str) -> dict | None: ...
    async def mark_otp_verified(self, phone_number: str) -> dict | None: ...

    # Job applications
    async def create_job_application(self, data: dict) -> dict: ...
    async def get_job_application(self, application_id: int) -> dict | None: ...
    async def get_job_application_by_driver_and_job(
        self, driver_id: int, job_id: int,
    ) -> dict | None: ...
    async def get_job_applications_by_driver(self, driver_id: int) -> list[dict]: ...
    async def get_job_applications_by_job(
        self, job_id: int, status: str | None = None,
    ) -> list[dict]: ...
    async def update_job_application(
        self, application_id: int, data: dict,
    ) -> dict | None: ...
    async def delete_job_application(self, application_id: int) -> bool: ...

    # Documents
    async def get_documents_by_user(self, user_id: int) -> list[dict]: ...
    async def get_document(self, document_pk: int) -> dict | None: ...
    async def get_document_by_document_id(self, document_id: str) -> dict | None: ...
    async def create_document(self, data: dict) -> dict: ...
    async def update_document(self, document_pk: int, data: dict) -> dict | None: ...
    async def delete_document(self, document_pk: int) -> bool: ...

    # Vehicle types
    async def get_vehicle_types(self, active_only: bool = True) -> list[dict]: ...
    async def get_vehicle_type(self, vehicle_type_id: int) -> dict | None: ...
    async def get_vehicle_type_by_name(self, name: str) -> dict | None: ...
    async def create_vehicle_type(self, data: dict) -> dict: ...

    # Vehicles
    async def get_vehicle_by_registration(
        self, registration_number: str,
    ) -> dict | None: ...
    async def get_vehicles_by_transporter(self, transporter_id: int) -> list[dict]: ...
    async def create_vehicle(self, data: dict) -> dict: ...

    # Vehicle checklists
    async def get_checklists_by_vehicle(self, vehicle_id: str) -> list[dict]: ...
    async def get_checklist(self, checklist_id: int) -> dict | None: ...
    async def create_checklist(self, data: dict) -> dict: ...
    async def update_checklist(self, checklist_id: int, data: dict) -> dict | None: ...
    async def delete_checklist(self, checklist_id: int) -> bool: ...

    # Trips
    async def get_trips_by_driver(self, driver_id: str) -> list[dict]: ...
    async def get_trips_by_transporter(self, transporter_id: str) -> list[dict]: ...
    async def get_trip(self, trip_pk: int) -> dict | None: ...
    async def get_trip_ids(self) -> list[str]: ...
    async def create_trip(self, data: dict) -> dict: ...
    async def update_trip(self, trip_pk: int, data: dict) -> dict | None: ...
    async def delete_trip(self, trip_pk: int) -> bool: ...

    # Notifications (newest first)
    async def get_notifications(self, user_id: int, user_type: str) -> list[dict]: ...
    async def create_notification(self, data: dict) -> dict: ...
    async def mark_notification_read(self, notification_id: int) -> dict | None: ...

    # Referrals
    async def get_referrals(self, referrer_id: int) -> list[dict]: ...
    async def create_referral(self, data: dict) -> dict: ...

    # Driver assessments
    async def get_driver_assessments(
        self, driver_id: int, status: str | None = None,
    ) -> list[dict]: ...
    async def create_driver_assessment(self, data: dict) -> dict: ...

    # Navigation
    async def get_fuel_pumps(self) -> list[dict]: ...
    async def create_fuel_pump(self, data: dict) -> dict: ...
    async def get_tolls(self) -> list[dict]: ...
    async def create_toll(self, data: dict) -> dict: ...

    # Frappe driver mirror
    async def list_frappe_drivers(
        self,
        is_active: bool | None = None,
        category: str | None = None,
        offset: int = 0,
        limit: int = 10,
    ) -> tuple[list[dict], int]: ...
    async def get_frappe_driver(self, doc_name: str) -> dict | None: ...
    async def get_frappe_driver_by_phone(self, phone_number: str) -> dict | None: ...
    async def get_frappe_doc_names(self) -> list[str]: ...
    async def create_frappe_driver(self, data: dict) -> dict: ...
    async def update_frappe_driver(self, doc_name: str, data: dict) -> dict | None: ...
    async def delete_frappe_driver(self, doc_name: str) -> bool: ...
