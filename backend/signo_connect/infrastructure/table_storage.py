"""Table Storage — Storage operations expressed over five table primitives.

Invariants:
    - Subclasses implement only _insert, _first, _all, _patch, _remove
    - Every operation of core.repository_protocols.Storage is defined here once,
      so MemoryStorage and DatabaseStorage cannot drift apart
    - Records in and out are dicts keyed by column name
    - Timestamps stamped here (updated_at, modified, verified_at) are UTC-aware

Design Decisions:
    - Template-method base over duplicated per-backend methods: the backends differ
      in how rows are found and written, never in what an operation means
    - Tables addressed by __tablename__ strings: both backends resolve them through
      Base.metadata
"""

from datetime import datetime, timezone


def _now() -> datetime:
    return datetime.now(timezone.utc)


class TableStorage:
    """Shared Storage implementation. Subclasses provide the row primitives."""

    # ─── Primitives (backend-specific) ──────────────────────────

    async def _insert(self, table: str, data: dict) -> dict:
        raise NotImplementedError

    async def _first(self, table: str, **equals: object) -> dict | None:
        raise NotImplementedError

    async def _all(
        self,
        table: str,
        *,
        descending: bool = False,
        contains: tuple[str, str] | None = None,
        **equals: object,
    ) -> list[dict]:
        """Rows matching every equals filter, ordered by id.

        contains=(column, text) adds a case-insensitive substring match.
        """
        raise NotImplementedError

    async def _patch(self, table: str, row_id: int, data: dict) -> dict | None:
        raise NotImplementedError

    async def _remove(self, table: str, **equals: object) -> int:
        raise NotImplementedError

    # ─── Users ──────────────────────────────────────────────────

    async def get_user(self, user_id: int) -> dict | None:
        return await self._first("users", id=user_id)

    async def get_user_by_phone(self, phone_number: str) -> dict | None:
        return await self._first("users", phone_number=phone_number)

    async def create_user(self, data: dict) -> dict:
        return await self._insert("users", data)

    async def update_user(self, user_id: int, data: dict) -> dict | None:
        return await self._patch("users", user_id, data)

    async def list_users(self, user_type: str | None = None) -> list[dict]:
        if user_type is None:
            return await self._all("users")
        return await self._all("users", user_type=user_type)

    # ─── Drivers ────────────────────────────────────────────────

    async def get_driver(self, user_id: int) -> dict | None:
        return await self._first("drivers", user_id=user_id)

    async def get_driver_by_id(self, driver_id: int) -> dict | None:
        return await self._first("drivers", id=driver_id)

    async def create_driver(self, data: dict) -> dict:
        return await self._insert("drivers", data)

    async def update_driver(self, user_id: int, data: dict) -> dict | None:
        driver = await self.get_driver(user_id)
        if not driver:
            return None
        return await self._patch("drivers", driver["id"], data)

    async def list_drivers(self) -> list[dict]:
        return await self._all("drivers")

    # ─── Fleet owners ───────────────────────────────────────────

    async def get_fleet_owner(self, user_id: int) -> dict | None:
        return await self._first("fleet_owners", user_id=user_id)

    async def create_fleet_owner(self, data: dict) -> dict:
        return await self._insert("fleet_owners", data)

    async def update_fleet_owner(self, user_id: int, data: dict) -> dict | None:
        owner = await self.get_fleet_owner(user_id)
        if not owner:
            return None
        return await self._patch("fleet_owners", owner["id"], data)

    # ─── Jobs ───────────────────────────────────────────────────

    async def get_job(self, job_id: int) -> dict | None:
        return await self._first("jobs", id=job_id)

    async def get_jobs_by_fleet_owner(self, fleet_owner_id: int) -> list[dict]:
        return await self._all("jobs", fleet_owner_id=fleet_owner_id)

    async def get_jobs_by_location(self, location: str) -> list[dict]:
        return await self._all("jobs", contains=("location", location))

    async def create_job(self, data: dict) -> dict:
        return await self._insert("jobs", data)

    async def update_job(self, job_id: int, data: dict) -> dict | None:
        return await self._patch("jobs", job_id, data)

    # ─── OTP ────────────────────────────────────────────────────

    async def create_otp_verification(self, data: dict) -> dict:
        await self._remove("otp_verifications", phone_number=data["phone_number"])
        return await self._insert("otp_verifications", data)

    async def get_otp_verification(self, phone_number: str) -> dict | None:
        return await self._first("otp_verifications", phone_number=phone_number)

    async def mark_otp_verified(self, phone_number: str) -> dict | None:
        record = await self.get_otp_verification(phone_number)
        if not record:
            return None
        return await self._patch(
            "otp_verifications", record["id"], {"verified": True},
        )

    # ─── Job applications ───────────────────────────────────────

    async def create_job_application(self, data: dict) -> dict:
        return await self._insert("job_applications", data)

    async def get_job_application(self, application_id: int) -> dict | None:
        return await self._first("job_applications", id=application_id)

    async def get_job_application_by_driver_and_job(
        self, driver_id: int, job_id: int,
    ) -> dict | None:
        return await self._first(
            "job_applications", driver_id=driver_id, job_id=job_id,
        )

    async def get_job_applications_by_driver(self, driver_id: int) -> list[dict]:
        return await self._all("job_applications", driver_id=driver_id)

    async def get_job_applications_by_job(
        self, job_id: int, status: str | None = None,
    ) -> list[dict]:
        if status is None:
            return await self._all("job_applications", job_id=job_id)
        return await self._all("job_applications", job_id=job_id, status=status)

    async def update_job_application(
        self, application_id: int, data: dict,
    ) -> dict | None:
        return await self._patch(
            "job_applications", application_id, {**data, "updated_at": _now()},
        )

    async def delete_job_application(self, application_id: int) -> bool:
        return await self._remove("job_applications", id=application_id) > 0

    # ─── Documents ──────────────────────────────────────────────

    async def get_documents_by_user(self, user_id: int) -> list[dict]:
        return await self._all("documents", user_id=user_id)

    async def get_document(self, document_pk: int) -> dict | None:
        return await self._first("documents", id=document_pk)

    async def get_document_by_document_id(self, document_id: str) -> dict | None:
        return await self._first("documents", document_id=document_id)

    async def create_document(self, data: dict) -> dict:
        return await self._insert("documents", data)

    async def update_document(self, document_pk: int, data: dict) -> dict | None:
        return await self._patch("documents", document_pk, data)

    async def delete_document(self, document_pk: int) -> bool:
        return await self._remove("documents", id=document_pk) > 0

    # ─── Vehicle types ──────────────────────────────────────────

    async def get_vehicle_types(self, active_only: bool = True) -> list[dict]:
        if active_only:
            return await self._all("vehicle_types", is_active=True)
        return await self._all("vehicle_types")

    async def get_vehicle_type(self, vehicle_type_id: int) -> dict | None:
        return await self._first("vehicle_types", id=vehicle_type_id)

    async def get_vehicle_type_by_name(self, name: str) -> dict | None:
        return await self._first("vehicle_types", vehicle_type=name)

    async def create_vehicle_type(self, data: dict) -> dict:
        return await self._insert("vehicle_types", data)

    # ─── Vehicles ───────────────────────────────────────────────

    async def get_vehicle_by_registration(
        self, registration_number: str,
    ) -> dict | None:
        return await self._first(
            "vehicles", registration_number=registration_number,
        )

    async def get_vehicles_by_transporter(self, transporter_id: int) -> list[dict]:
        return await self._all("vehicles", transporter_id=transporter_id)

    async def create_vehicle(self, data: dict) -> dict:
        return await self._insert("vehicles", data)

    # ─── Vehicle checklists ─────────────────────────────────────

    async def get_checklists_by_vehicle(self, vehicle_id: str) -> list[dict]:
        return await self._all("vehicle_checklists", vehicle_id=vehicle_id)

    async def get_checklist(self, checklist_id: int) -> dict | None:
        return await self._first("vehicle_checklists", id=checklist_id)

    async def create_checklist(self, data: dict) -> dict:
        return await self._insert("vehicle_checklists", data)

    async def update_checklist(self, checklist_id: int, data: dict) -> dict | None:
        return await self._patch("vehicle_checklists", checklist_id, data)

    async def delete_checklist(self, checklist_id: int) -> bool:
        return await self._remove("vehicle_checklists", id=checklist_id) > 0

    # ─── Trips ──────────────────────────────────────────────────

    async def get_trips_by_driver(self, driver_id: str) -> list[dict]:
        return await self._all("trips", driver_id=driver_id)

    async def get_trips_by_transporter(self, transporter_id: str) -> list[dict]:
        return await self._all("trips", transporter_id=transporter_id)

    async def get_trip(self, trip_pk: int) -> dict | None:
        return await self._first("trips", id=trip_pk)

    async def get_trip_ids(self) -> list[str]:
        return [t["trip_id"] for t in await self._all("trips")]

    async def create_trip(self, data: dict) -> dict:
        return await self._insert("trips", data)

    async def update_trip(self, trip_pk: int, data: dict) -> dict | None:
        return await self._patch("trips", trip_pk, data)

    async def delete_trip(self, trip_pk: int) -> bool:
        return await self._remove("trips", id=trip_pk) > 0

    # ─── Notifications ──────────────────────────────────────────

    async def get_notifications(self, user_id: int, user_type: str) -> list[dict]:
        return await self._all(
            "notifications", descending=True,
            user_id=user_id, user_type=user_type,
        )

    async def create_notification(self, data: dict) -> dict:
        return await self._insert("notifications", data)

    async def mark_notification_read(self, notification_id: int) -> dict | None:
        return await self._patch("notifications", notification_id, {"read": True})

    # ─── Referrals ──────────────────────────────────────────────

    async def get_referrals(self, referrer_id: int) -> list[dict]:
        return await self._all("referrals", referrer_id=referrer_id)

    async def create_referral(self, data: dict) -> dict:
        return await self._insert("referrals", data)

    # ─── Driver assessments ─────────────────────────────────────

    async def get_driver_assessments(
        self, driver_id: int, status: str | None = None,
    ) -> list[dict]:
        if status is None:
            return await self._all("driver_assessments", driver_id=driver_id)
        return await self._all(
            "driver_assessments", driver_id=driver_id, status=status,
        )

    async def create_driver_assessment(self, data: dict) -> dict:
        return await self._insert("driver_assessments", data)

    # ─── Navigation ─────────────────────────────────────────────

    async def get_fuel_pumps(self) -> list[dict]:
        return await self._all("fuel_pumps")

    async def create_fuel_pump(self, data: dict) -> dict:
        return await self._insert("fuel_pumps", data)

    async def get_tolls(self) -> list[dict]:
        return await self._all("tolls")

    async def create_toll(self, data: dict) -> dict:
        return await self._insert("tolls", data)

    # ─── Frappe driver mirror ───────────────────────────────────

    async def list_frappe_drivers(
        self,
        is_active: bool | None = None,
        category: str | None = None,
        offset: int = 0,
        limit: int = 10,
    ) -> tuple[list[dict], int]:
        filters: dict[str, object] = {}
        if is_active is not None:
            filters["is_active"] = is_active
        if category:
            filters["category"] = category
        rows = await self._all("frappe_drivers", **filters)
        return rows[offset:offset + limit], len(rows)

    async def get_frappe_driver(self, doc_name: str) -> dict | None:
        return await self._first("frappe_drivers", doc_name=doc_name)

    async def get_frappe_driver_by_phone(self, phone_number: str) -> dict | None:
        return await self._first("frappe_drivers", phone_number=phone_number)

    async def get_frappe_doc_names(self) -> list[str]:
        return [d["doc_name"] for d in await self._all("frappe_drivers")]

    async def create_frappe_driver(self, data: dict) -> dict:
        return await self._insert("frappe_drivers", data)

    async def update_frappe_driver(self, doc_name: str, data: dict) -> dict | None:
        driver = await self.get_frappe_driver(doc_name)
        if not driver:
            return None
        return await self._patch(
            "frappe_drivers", driver["id"], {**data, "modified": _now()},
        )

    async def delete_frappe_driver(self, doc_name: str) -> bool:
        return await self._remove("frappe_drivers", doc_name=doc_name) > 0
