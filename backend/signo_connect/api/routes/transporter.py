"""Transporter — server-side proxy for the Frappe transporter flows and driver job recommendations.

Invariants:
    - All Frappe traffic goes through the shared FrappeClient (get_frappe)
    - Frappe failures surface as 502 FRAPPE_API_ERROR via the global handler
    - tags arrive comma-separated ("Heavy,kyc_verified")
"""

import logging

from fastapi import APIRouter, Depends, Query

from signo_connect.api.dependencies import get_frappe
from signo_connect.infrastructure.frappe_client import FrappeClient
from signo_connect.schemas.base import camelize
from signo_connect.schemas.frappe import (
    JobStatusUpdate, TransporterJobCreate, TransporterJobEdit,
    TransporterProfileUpdate, TransporterRegister,
)
from signo_connect.services import transporter

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/transporter", tags=["transporter"])
driver_router = APIRouter(prefix="/api/driver", tags=["transporter"])


def _split_tags(tags: str | None) -> list[str]:
    return [t.strip() for t in (tags or "").split(",") if t.strip()]


@router.get("/drivers")
async def list_drivers(
    search: str | None = Query(None),
    tags: str | None = Query(None),
    min_completion: int = Query(60, ge=0, le=100),
    client: FrappeClient = Depends(get_frappe),
):
    """Frappe drivers with completion at or above min_completion."""
    drivers = await transporter.list_directory_drivers(
        client, search, _split_tags(tags), min_completion,
    )
    return {"data": camelize(drivers), "total": len(drivers)}


@router.get("/jobs")
async def list_posted_jobs(
    transporter_id: str = Query(..., alias="transporter", min_length=1),
    client: FrappeClient = Depends(get_frappe),
):
    jobs = await transporter.list_posted_jobs(client, transporter_id)
    return {"data": camelize(jobs), "total": len(jobs)}


@router.post("/jobs")
async def post_job(
    body: TransporterJobCreate, client: FrappeClient = Depends(get_frappe),
):
    return await transporter.post_job(client, body.to_record())


@router.put("/jobs/{feed_id}")
async def edit_job(
    feed_id: str, body: TransporterJobEdit, client: FrappeClient = Depends(get_frappe),
):
    """Replace the content of a posted job."""
    return await transporter.edit_job(client, feed_id, body.to_record())


@router.patch("/jobs/{job}/status")
async def change_job_status(
    job: str, body: JobStatusUpdate, client: FrappeClient = Depends(get_frappe),
):
    return await transporter.change_job_status(client, job, body.feed_id, body.status)


@router.delete("/jobs/{job}")
async def delete_job(job: str, client: FrappeClient = Depends(get_frappe)):
    return await transporter.delete_job(client, job)


@router.get("/trips")
async def list_trips(
    transporter_id: str = Query(..., min_length=1),
    client: FrappeClient = Depends(get_frappe),
):
    trips = await client.get_trips(transporter_id)
    return {"data": trips, "total": len(trips)}


@router.get("/profile")
async def get_profile(
    phone_number: str = Query(..., min_length=6),
    client: FrappeClient = Depends(get_frappe),
):
    """Transporter profile with its completion score and missing items."""
    return camelize(await transporter.get_profile(client, phone_number))


@router.put("/profile/{transporter_id}")
async def update_profile(
    transporter_id: str,
    body: TransporterProfileUpdate,
    client: FrappeClient = Depends(get_frappe),
):
    return await transporter.update_profile(
        client, transporter_id, body.to_changes(),
    )


@router.post("/register")
async def register(body: TransporterRegister, client: FrappeClient = Depends(get_frappe)):
    return await transporter.register_transporter(client, body.to_record())


@driver_router.get("/recommended-jobs")
async def recommended_jobs(
    limit: int = Query(2, ge=1, le=20),
    client: FrappeClient = Depends(get_frappe),
):
    """Best-paying Frappe jobs for the driver dashboard."""
    jobs = await transporter.recommended_jobs(client, limit)
    return {"data": jobs, "total": len(jobs)}
