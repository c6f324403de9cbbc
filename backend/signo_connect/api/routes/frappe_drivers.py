"""Frappe Driver Mirror — local CRUD copy of the Frappe Drivers doctype.

Invariants:
    - docName is "SIG" + 5-digit sequence, assigned on create
    - phoneNumber is unique across mirror records (409)
    - Every route requires X-API-Key when admin_api_key is configured
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from signo_connect.api.dependencies import get_storage, require_admin_key
from signo_connect.core.errors import ConflictError, ResourceNotFoundError
from signo_connect.core.naming_series import next_driver_doc_name
from signo_connect.core.repository_protocols import Storage
from signo_connect.schemas.base import camelize
from signo_connect.schemas.frappe import FrappeDriverCreate, FrappeDriverUpdate

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/frappe-drivers",
    tags=["frappe-drivers"],
    dependencies=[Depends(require_admin_key)],
)


def _phone_taken(phone_number: str) -> ConflictError:
    return ConflictError(
        f"A driver with phone number {phone_number} already exists",
        "PHONE_ALREADY_REGISTERED",
    )


@router.get("")
async def list_frappe_drivers(
    is_active: bool | None = Query(None, alias="isActive"),
    category: str | None = Query(None),
    offset: int = Query(0, ge=0),
    limit: int = Query(10, ge=1, le=100),
    storage: Storage = Depends(get_storage),
):
    rows, total = await storage.list_frappe_drivers(is_active, category, offset, limit)
    return {"data": camelize(rows), "total": total, "offset": offset, "limit": limit}


@router.get("/phone/{phone_number}")
async def get_frappe_driver_by_phone(
    phone_number: str, storage: Storage = Depends(get_storage),
):
    driver = await storage.get_frappe_driver_by_phone(phone_number)
    if not driver:
        raise ResourceNotFoundError("Frappe driver", phone_number)
    return camelize(driver)


@router.get("/{doc_name}")
async def get_frappe_driver(doc_name: str, storage: Storage = Depends(get_storage)):
    driver = await storage.get_frappe_driver(doc_name)
    if not driver:
        raise ResourceNotFoundError("Frappe driver", doc_name)
    return camelize(driver)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_frappe_driver(
    body: FrappeDriverCreate, storage: Storage = Depends(get_storage),
):
    """Add a driver under the next SIG doc name."""
    if await storage.get_frappe_driver_by_phone(body.phone_number):
        raise _phone_taken(body.phone_number)
    doc_name = next_driver_doc_name(await storage.get_frappe_doc_names())
    driver = await storage.create_frappe_driver(
        {**body.to_record(), "doc_name": doc_name},
    )
    logger.info("Frappe driver created", extra={"doc_name": doc_name})
    return camelize(driver)


@router.patch("/{doc_name}")
async def update_frappe_driver(
    doc_name: str, body: FrappeDriverUpdate, storage: Storage = Depends(get_storage),
):
    existing = await storage.get_frappe_driver(doc_name)
    if not existing:
        raise ResourceNotFoundError("Frappe driver", doc_name)
    changes = body.to_changes()
    new_phone = changes.get("phone_number")
    if new_phone and new_phone != existing["phone_number"]:
        holder = await storage.get_frappe_driver_by_phone(new_phone)
        if holder and holder["doc_name"] != doc_name:
            raise _phone_taken(new_phone)
    driver = await storage.update_frappe_driver(doc_name, changes)
    logger.info("Frappe driver updated", extra={"doc_name": doc_name})
    return camelize(driver)


@router.delete("/{doc_name}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_frappe_driver(doc_name: str, storage: Storage = Depends(get_storage)):
    if not await storage.delete_frappe_driver(doc_name):
        raise ResourceNotFoundError("Frappe driver", doc_name)
    logger.info("Frappe driver deleted", extra={"doc_name": doc_name})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
