"""Trips — trip log for drivers and transporters, with a per-driver summary.

Invariants:
    - Listing needs driver_id or transporter_id (400 otherwise)
    - /trips/summary is declared before /trips/{trip_pk} so "summary" never parses as an id
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from signo_connect.api.dependencies import get_storage
from signo_connect.core.errors import ResourceNotFoundError, ValidationFailedError
from signo_connect.core.repository_protocols import Storage
from signo_connect.core.trip_stats import compute_trip_summary
from signo_connect.schemas.base import camelize
from signo_connect.schemas.trips import TripCreate, TripUpdate
from signo_connect.services import trips

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/trips", tags=["trips"])


@router.get("")
async def list_trips(
    driver_id: str | None = Query(None),
    transporter_id: str | None = Query(None),
    storage: Storage = Depends(get_storage),
):
    if driver_id:
        return camelize(await storage.get_trips_by_driver(driver_id))
    if transporter_id:
        return camelize(await storage.get_trips_by_transporter(transporter_id))
    raise ValidationFailedError(
        "driver_id or transporter_id is required", "driver_id",
    )


@router.get("/summary")
async def trip_summary(
    driver_id: str = Query(..., min_length=1),
    storage: Storage = Depends(get_storage),
):
    """Totals and counts over a driver's trips."""
    summary = compute_trip_summary(await storage.get_trips_by_driver(driver_id))
    return camelize(summary)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_trip(body: TripCreate, storage: Storage = Depends(get_storage)):
    return camelize(await trips.create_trip(storage, body.to_record()))


@router.get("/{trip_pk}")
async def get_trip(trip_pk: int, storage: Storage = Depends(get_storage)):
    trip = await storage.get_trip(trip_pk)
    if not trip:
        raise ResourceNotFoundError("Trip", trip_pk)
    return camelize(trip)


@router.put("/{trip_pk}")
async def update_trip(
    trip_pk: int, body: TripUpdate, storage: Storage = Depends(get_storage),
):
    trip = await trips.update_trip(
        storage, trip_pk, body.to_changes(),
    )
    return camelize(trip)


@router.delete("/{trip_pk}")
async def delete_trip(trip_pk: int, storage: Storage = Depends(get_storage)):
    if not await storage.delete_trip(trip_pk):
        raise ResourceNotFoundError("Trip", trip_pk)
    return {"success": True}
