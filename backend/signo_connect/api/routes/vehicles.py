"""Vehicles & Checklists — transporter vehicles and per-vehicle inspection items.

Invariants:
    - registrationNumber is unique (409 on repeat)
    - vehicle-details seeds a sample vehicle only for a known transporter_id with
      seed_demo_data on; otherwise a missing vehicle is 404
    - Checklist vehicleId is stored as text
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Query, status

from signo_connect.api.dependencies import get_storage
from signo_connect.config import Settings, get_settings
from signo_connect.core.errors import ConflictError, ResourceNotFoundError
from signo_connect.core.repository_protocols import Storage
from signo_connect.core.sample_data import sample_vehicle
from signo_connect.schemas.base import camelize
from signo_connect.schemas.vehicles import ChecklistCreate, ChecklistUpdate, VehicleCreate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["vehicles"])


@router.get("/vehicle-details")
async def vehicle_details(
    registration_number: str = Query(..., min_length=1),
    transporter_id: int | None = Query(None),
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
):
    """Vehicle by registration number."""
    vehicle = await storage.get_vehicle_by_registration(registration_number)
    if not vehicle and transporter_id is not None and settings.seed_demo_data:
        vehicle = await storage.create_vehicle(sample_vehicle(
            registration_number, transporter_id, datetime.now(timezone.utc),
        ))
        logger.info(f"Seeded sample vehicle {registration_number}")
    if not vehicle:
        raise ResourceNotFoundError("Vehicle", registration_number)
    return {
        "message": "Vehicle details fetched successfully",
        "data": camelize(vehicle),
    }


@router.get("/vehicles")
async def list_vehicles(
    transporter_id: int = Query(...), storage: Storage = Depends(get_storage),
):
    vehicles = await storage.get_vehicles_by_transporter(transporter_id)
    return {"message": "Vehicles fetched successfully", "data": camelize(vehicles)}


@router.post("/vehicles", status_code=status.HTTP_201_CREATED)
async def create_vehicle(body: VehicleCreate, storage: Storage = Depends(get_storage)):
    if await storage.get_vehicle_by_registration(body.registration_number):
        raise ConflictError(
            f"Vehicle '{body.registration_number}' already registered",
            "VEHICLE_EXISTS",
        )
    vehicle = await storage.create_vehicle(body.to_record())
    return {"message": "Vehicle added successfully", "data": camelize(vehicle)}


@router.get("/vehicle/{vehicle_id}/checklists")
async def list_vehicle_checklists(
    vehicle_id: str, storage: Storage = Depends(get_storage),
):
    return {"checklists": camelize(await storage.get_checklists_by_vehicle(vehicle_id))}


@router.get("/vehicle-checklists/{checklist_id}")
async def get_checklist(checklist_id: int, storage: Storage = Depends(get_storage)):
    checklist = await storage.get_checklist(checklist_id)
    if not checklist:
        raise ResourceNotFoundError("Checklist item", checklist_id)
    return {"checklist": camelize(checklist)}


@router.post("/vehicle-checklists", status_code=status.HTTP_201_CREATED)
async def create_checklist(
    body: ChecklistCreate, storage: Storage = Depends(get_storage),
):
    return {"checklist": camelize(await storage.create_checklist(body.to_record()))}


@router.put("/vehicle-checklists/{checklist_id}")
async def update_checklist(
    checklist_id: int, body: ChecklistUpdate, storage: Storage = Depends(get_storage),
):
    checklist = await storage.update_checklist(
        checklist_id, body.to_changes(),
    )
    if not checklist:
        raise ResourceNotFoundError("Checklist item", checklist_id)
    return {"checklist": camelize(checklist)}


@router.delete("/vehicle-checklists/{checklist_id}")
async def delete_checklist(checklist_id: int, storage: Storage = Depends(get_storage)):
    if not await storage.delete_checklist(checklist_id):
        raise ResourceNotFoundError("Checklist item", checklist_id)
    return {"success": True}
