"""Job Applications — drivers applying to local jobs and fleet owners reviewing them.

Invariants:
    - Job and driver profile must exist before an application is stored
    - One application per (driver, job): a repeat raises ConflictError ALREADY_APPLIED
    - Only pending applications can be withdrawn
    - Listings join the related job (driver view) or driver + user (job view)
"""

import logging

from signo_connect.core.domain_types import ApplicationStatus
from signo_connect.core.errors import BusinessRuleError, ConflictError, ResourceNotFoundError
from signo_connect.core.repository_protocols import Storage

logger = logging.getLogger(__name__)


async def _driver_with_user(storage: Storage, driver: dict | None) -> dict | None:
    if driver is None:
        return None
    user = await storage.get_user(driver["user_id"])
    return {
        **driver,
        "name": user["full_name"] if user else "Unknown",
        "phone_number": user["phone_number"] if user else None,
    }


async def apply_to_job(storage: Storage, data: dict) -> dict:
    if not await storage.get_job(data["job_id"]):
        raise ResourceNotFoundError("Job", data["job_id"])
    if not await storage.get_driver_by_id(data["driver_id"]):
        raise ResourceNotFoundError("Driver", data["driver_id"])
    if await storage.get_job_application_by_driver_and_job(
        data["driver_id"], data["job_id"],
    ):
        raise ConflictError(
            "Driver has already applied to this job", "ALREADY_APPLIED",
        )
    application = await storage.create_job_application(data)
    logger.info(
        f"Driver {data['driver_id']} applied to job {data['job_id']}",
    )
    return application


async def list_for_job(
    storage: Storage, job_id: int, status: str | None = None,
) -> list[dict]:
    applications = await storage.get_job_applications_by_job(job_id, status)
    result = []
    for application in applications:
        driver = await storage.get_driver_by_id(application["driver_id"])
        result.append({
            **application,
            "driver": await _driver_with_user(storage, driver),
        })
    return result


async def list_for_driver(storage: Storage, driver_id: int) -> list[dict]:
    applications = await storage.get_job_applications_by_driver(driver_id)
    return [
        {**a, "job": await storage.get_job(a["job_id"])}
        for a in applications
    ]


async def get_application(storage: Storage, application_id: int) -> dict:
    application = await storage.get_job_application(application_id)
    if not application:
        raise ResourceNotFoundError("Job application", application_id)
    driver = await storage.get_driver_by_id(application["driver_id"])
    return {
        **application,
        "job": await storage.get_job(application["job_id"]),
        "driver": await _driver_with_user(storage, driver),
    }


async def update_application(
    storage: Storage, application_id: int, changes: dict,
) -> dict:
    updated = await storage.update_job_application(application_id, changes)
    if not updated:
        raise ResourceNotFoundError("Job application", application_id)
    return updated


async def withdraw_application(storage: Storage, application_id: int) -> None:
    application = await storage.get_job_application(application_id)
    if not application:
        raise ResourceNotFoundError("Job application", application_id)
    if application["status"] != ApplicationStatus.PENDING.value:
        raise BusinessRuleError(
            "Only pending applications can be withdrawn",
            "APPLICATION_NOT_PENDING",
        )
    await storage.delete_job_application(application_id)
