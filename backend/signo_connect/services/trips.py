"""Trips — trip logging with generated trip ids and derived payment/timestamp fields."""

import logging
from datetime import datetime, timezone

from signo_connect.core.errors import ResourceNotFoundError
from signo_connect.core.naming_series import next_trip_id
from signo_connect.core.repository_protocols import Storage
from signo_connect.core.trip_stats import derive_trip_fields

logger = logging.getLogger(__name__)


async def create_trip(storage: Storage, data: dict) -> dict:
    record = derive_trip_fields(data, None, datetime.now(timezone.utc))
    record["trip_id"] = next_trip_id(await storage.get_trip_ids())
    trip = await storage.create_trip(record)
    logger.info(f"Trip {trip['trip_id']} created for driver {trip['driver_id']}")
    return trip


async def update_trip(storage: Storage, trip_pk: int, changes: dict) -> dict:
    existing = await storage.get_trip(trip_pk)
    if not existing:
        raise ResourceNotFoundError("Trip", trip_pk)
    derived = derive_trip_fields(changes, existing, datetime.now(timezone.utc))
    return await storage.update_trip(trip_pk, derived) or existing
