"""Profiles — driver / fleet owner profiles and the local drivers directory.

Invariants:
    - Profile upserts answer 404 for unknown users, 403 for the wrong user type
    - The drivers directory requires transporter_id; total counts the filtered set
"""

import logging

from fastapi import APIRouter, Depends, Query

from signo_connect.api.dependencies import get_storage
from signo_connect.core.domain_types import DirectoryQueryType
from signo_connect.core.repository_protocols import Storage
from signo_connect.schemas.accounts import (
    DriverProfileRequest, DriverProfileUpdate, FleetOwnerProfileRequest,
)
from signo_connect.schemas.base import camelize
from signo_connect.services import accounts

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["profiles"])


@router.post("/driver-profile")
async def save_driver_profile(
    body: DriverProfileRequest, storage: Storage = Depends(get_storage),
):
    """Create or update the driver profile of a driver user."""
    return camelize(await accounts.save_driver_profile(storage, body.to_record()))


@router.post("/fleet-owner-profile")
async def save_fleet_owner_profile(
    body: FleetOwnerProfileRequest, storage: Storage = Depends(get_storage),
):
    """Create or update the company profile of a fleet owner user."""
    return camelize(
        await accounts.save_fleet_owner_profile(storage, body.to_record()),
    )


@router.get("/user/{user_id}")
async def get_user(user_id: int, storage: Storage = Depends(get_storage)):
    return camelize(await accounts.get_user_with_profile(storage, user_id))


@router.get("/resource/drivers/profile")
async def get_driver_profile(
    driver_id: int = Query(...), storage: Storage = Depends(get_storage),
):
    return camelize(await accounts.get_driver_profile(storage, driver_id))


@router.put("/resource/drivers/profile")
async def update_driver_profile(
    body: DriverProfileUpdate,
    driver_id: int = Query(...),
    storage: Storage = Depends(get_storage),
):
    """Partial update of the user and driver fields shown on the profile page."""
    changes = body.to_changes()
    return camelize(
        await accounts.update_driver_profile(storage, driver_id, changes),
    )


@router.get("/drivers-directory")
async def drivers_directory(
    transporter_id: int = Query(...),
    limit_start: int = Query(0, ge=0),
    limit_page_length: int = Query(20, ge=1, le=100),
    qtype: DirectoryQueryType | None = Query(None),
    q: str | None = Query(None),
    storage: Storage = Depends(get_storage),
):
    """Local drivers for a transporter, optionally searched by one field."""
    rows, total = await accounts.list_driver_directory(
        storage, qtype, q, limit_start, limit_page_length,
    )
    logger.info(
        f"Directory for transporter {transporter_id}: {len(rows)}/{total} drivers",
    )
    return {
        "message": "Drivers fetched successfully",
        "data": camelize(rows),
        "total": total,
    }
