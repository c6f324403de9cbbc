"""Documents & Vehicle Types — uploaded driver documents, verification and the vehicle type list.

Invariants:
    - documentId and vehicleType names are unique (409 on repeat)
    - Verifying stamps verified_at with the current time
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status

from signo_connect.api.dependencies import get_storage
from signo_connect.core.errors import ConflictError, ResourceNotFoundError
from signo_connect.core.repository_protocols import Storage
from signo_connect.schemas.base import camelize
from signo_connect.schemas.documents import (
    DocumentCreate, DocumentUpdate, DocumentVerify, VehicleTypeCreate,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["documents"])


@router.get("/user/{user_id}/documents")
async def list_user_documents(user_id: int, storage: Storage = Depends(get_storage)):
    return {"documents": camelize(await storage.get_documents_by_user(user_id))}


@router.get("/documents/{document_pk}")
async def get_document(document_pk: int, storage: Storage = Depends(get_storage)):
    document = await storage.get_document(document_pk)
    if not document:
        raise ResourceNotFoundError("Document", document_pk)
    return {"document": camelize(document)}


@router.post("/documents", status_code=status.HTTP_201_CREATED)
async def create_document(
    body: DocumentCreate, storage: Storage = Depends(get_storage),
):
    if await storage.get_document_by_document_id(body.document_id):
        raise ConflictError(
            f"Document '{body.document_id}' already exists", "DOCUMENT_EXISTS",
        )
    document = await storage.create_document(body.to_record())
    logger.info(
        f"Document {document['document_id']} uploaded",
        extra={"user_id": document["user_id"]},
    )
    return {"document": camelize(document)}


@router.put("/documents/{document_pk}")
async def update_document(
    document_pk: int, body: DocumentUpdate, storage: Storage = Depends(get_storage),
):
    document = await storage.update_document(
        document_pk, body.to_changes(),
    )
    if not document:
        raise ResourceNotFoundError("Document", document_pk)
    return {"document": camelize(document)}


@router.delete("/documents/{document_pk}")
async def delete_document(document_pk: int, storage: Storage = Depends(get_storage)):
    if not await storage.delete_document(document_pk):
        raise ResourceNotFoundError("Document", document_pk)
    return {"success": True}


@router.post("/documents/{document_pk}/verify")
async def verify_document(
    document_pk: int, body: DocumentVerify, storage: Storage = Depends(get_storage),
):
    """Record the verification decision and who made it."""
    document = await storage.update_document(document_pk, {
        "is_verified": body.is_verified,
        "verified_by": body.verified_by,
        "verified_at": datetime.now(timezone.utc),
    })
    if not document:
        raise ResourceNotFoundError("Document", document_pk)
    return {"document": camelize(document)}


@router.get("/vehicle-types")
async def list_vehicle_types(storage: Storage = Depends(get_storage)):
    return {"vehicleTypes": camelize(await storage.get_vehicle_types(active_only=True))}


@router.get("/vehicle-types/{vehicle_type_id}")
async def get_vehicle_type(
    vehicle_type_id: int, storage: Storage = Depends(get_storage),
):
    vehicle_type = await storage.get_vehicle_type(vehicle_type_id)
    if not vehicle_type:
        raise ResourceNotFoundError("Vehicle type", vehicle_type_id)
    return {"vehicleType": camelize(vehicle_type)}


@router.post("/vehicle-types", status_code=status.HTTP_201_CREATED)
async def create_vehicle_type(
    body: VehicleTypeCreate, storage: Storage = Depends(get_storage),
):
    if await storage.get_vehicle_type_by_name(body.vehicle_type):
        raise ConflictError(
            f"Vehicle type '{body.vehicle_type}' already exists",
            "VEHICLE_TYPE_EXISTS",
        )
    return {"vehicleType": camelize(await storage.create_vehicle_type(body.to_record()))}
