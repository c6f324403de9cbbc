"""Jobs — local job postings by fleet owners.

Invariants:
    - fleetOwnerId is the fleet owner's user id and must have a fleet owner profile
    - GET /api/jobs requires location (case-insensitive substring match)
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from signo_connect.api.dependencies import get_storage
from signo_connect.core.errors import ResourceNotFoundError
from signo_connect.core.repository_protocols import Storage
from signo_connect.schemas.base import camelize
from signo_connect.schemas.jobs import JobCreate, JobUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["jobs"])


@router.post("/jobs", status_code=status.HTTP_201_CREATED)
async def create_job(body: JobCreate, storage: Storage = Depends(get_storage)):
    if not await storage.get_fleet_owner(body.fleet_owner_id):
        raise ResourceNotFoundError("Fleet owner", body.fleet_owner_id)
    job = await storage.create_job(body.to_record())
    logger.info(
        f"Job {job['id']} posted", extra={"user_id": body.fleet_owner_id},
    )
    return camelize(job)


@router.get("/jobs")
async def list_jobs(
    location: str = Query(..., min_length=1),
    storage: Storage = Depends(get_storage),
):
    """Jobs whose location contains the given text."""
    return camelize(await storage.get_jobs_by_location(location))


@router.get("/jobs/{job_id}")
async def get_job(job_id: int, storage: Storage = Depends(get_storage)):
    job = await storage.get_job(job_id)
    if not job:
        raise ResourceNotFoundError("Job", job_id)
    return camelize(job)


@router.patch("/jobs/{job_id}")
async def update_job(
    job_id: int, body: JobUpdate, storage: Storage = Depends(get_storage),
):
    job = await storage.update_job(job_id, body.to_changes())
    if not job:
        raise ResourceNotFoundError("Job", job_id)
    return camelize(job)


@router.get("/fleet-owner/{fleet_owner_id}/jobs")
async def list_fleet_owner_jobs(
    fleet_owner_id: int, storage: Storage = Depends(get_storage),
):
    return camelize(await storage.get_jobs_by_fleet_owner(fleet_owner_id))
