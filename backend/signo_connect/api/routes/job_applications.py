"""Job Applications — apply, review and withdraw."""

import logging

from fastapi import APIRouter, Depends, Query, status

from signo_connect.api.dependencies import get_storage
from signo_connect.core.domain_types import ApplicationStatus
from signo_connect.core.repository_protocols import Storage
from signo_connect.schemas.base import camelize
from signo_connect.schemas.jobs import JobApplicationCreate, JobApplicationUpdate
from signo_connect.services import applications

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["job-applications"])


@router.post("/job-applications", status_code=status.HTTP_201_CREATED)
async def apply_to_job(
    body: JobApplicationCreate, storage: Storage = Depends(get_storage),
):
    application = await applications.apply_to_job(storage, body.to_record())
    return {"application": camelize(application)}


@router.get("/jobs/{job_id}/applications")
async def list_job_applications(
    job_id: int,
    status_filter: ApplicationStatus | None = Query(None, alias="status"),
    storage: Storage = Depends(get_storage),
):
    """Applications for a job with the applying driver's name and phone."""
    result = await applications.list_for_job(
        storage, job_id, status_filter.value if status_filter else None,
    )
    return {"applications": camelize(result)}


@router.get("/drivers/{driver_id}/applications")
async def list_driver_applications(
    driver_id: int, storage: Storage = Depends(get_storage),
):
    result = await applications.list_for_driver(storage, driver_id)
    return {"applications": camelize(result)}


@router.get("/job-applications/{application_id}")
async def get_job_application(
    application_id: int, storage: Storage = Depends(get_storage),
):
    application = await applications.get_application(storage, application_id)
    return {"application": camelize(application)}


@router.put("/job-applications/{application_id}")
async def update_job_application(
    application_id: int,
    body: JobApplicationUpdate,
    storage: Storage = Depends(get_storage),
):
    application = await applications.update_application(
        storage, application_id, body.to_changes(),
    )
    return {"application": camelize(application)}


@router.delete("/job-applications/{application_id}")
async def withdraw_job_application(
    application_id: int, storage: Storage = Depends(get_storage),
):
    """Withdraw a pending application."""
    await applications.withdraw_application(storage, application_id)
    return {"success": True}
