"""Engagement — notifications, referrals and driver assessments."""

import logging

from fastapi import APIRouter, Depends, Query, status

from signo_connect.api.dependencies import get_storage
from signo_connect.config import Settings, get_settings
from signo_connect.core.domain_types import AssessmentStatus, UserType
from signo_connect.core.errors import ResourceNotFoundError
from signo_connect.core.repository_protocols import Storage
from signo_connect.schemas.base import camelize
from signo_connect.schemas.engagement import (
    AssessmentSubmit, NotificationCreate, ReferralCreate,
)
from signo_connect.services import engagement

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["engagement"])


@router.get("/notifications")
async def list_notifications(
    user_id: int = Query(...),
    user_type: UserType = Query(...),
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
):
    """Notifications for a user, newest first."""
    notifications = await engagement.list_notifications(
        storage, user_id, user_type.value, settings.seed_demo_data,
    )
    return {
        "message": "Notifications fetched successfully",
        "data": camelize(notifications),
    }


@router.post("/notifications", status_code=status.HTTP_201_CREATED)
async def create_notification(
    body: NotificationCreate, storage: Storage = Depends(get_storage),
):
    notification = await storage.create_notification(body.to_record())
    return {"message": "Notification created", "data": camelize(notification)}


@router.post("/read-notification/{notification_id}")
async def read_notification(
    notification_id: int, storage: Storage = Depends(get_storage),
):
    notification = await storage.mark_notification_read(notification_id)
    if not notification:
        raise ResourceNotFoundError("Notification", notification_id)
    return {"message": "Notification marked as read", "data": camelize(notification)}


@router.get("/referrals")
async def list_referrals(
    driver_id: int = Query(...),
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
):
    referrals = await engagement.list_referrals(
        storage, driver_id, settings.seed_demo_data,
    )
    return {"message": "Referrals fetched successfully", "data": camelize(referrals)}


@router.post("/referrals", status_code=status.HTTP_201_CREATED)
async def create_referral(
    body: ReferralCreate, storage: Storage = Depends(get_storage),
):
    referral = await engagement.create_referral(storage, body.to_record())
    return {"message": "Referral created successfully", "data": camelize(referral)}


@router.get("/driver-assessments")
async def list_driver_assessments(
    driver_id: int = Query(...),
    status_filter: AssessmentStatus | None = Query(None, alias="status"),
    storage: Storage = Depends(get_storage),
):
    assessments = await storage.get_driver_assessments(
        driver_id, status_filter.value if status_filter else None,
    )
    return {
        "message": "Assessments fetched successfully",
        "data": camelize(assessments),
    }


@router.post("/submit-assessment", status_code=status.HTTP_201_CREATED)
async def submit_assessment(
    body: AssessmentSubmit, storage: Storage = Depends(get_storage),
):
    """Store a completed assessment with its score."""
    assessment = await engagement.submit_assessment(storage, body.to_record())
    return {
        "message": "Assessment submitted successfully",
        "data": camelize(assessment),
    }
