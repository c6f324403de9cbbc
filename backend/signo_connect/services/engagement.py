"""Engagement — notifications, referrals and driver assessments.

Invariants:
    - Empty notification/referral lists are seeded with demo rows only when
      seed_demo_data is enabled
    - Submitted assessments are stored as completed with completed_at = now
"""

import logging
from datetime import datetime, timezone

from signo_connect.core.domain_types import AssessmentStatus, ReferralStatus
from signo_connect.core.repository_protocols import Storage
from signo_connect.core.sample_data import sample_notifications, sample_referrals

logger = logging.getLogger(__name__)


async def list_notifications(
    storage: Storage, user_id: int, user_type: str, seed: bool,
) -> list[dict]:
    notifications = await storage.get_notifications(user_id, user_type)
    if notifications or not seed:
        return notifications
    for notification in sample_notifications(user_id, user_type):
        await storage.create_notification(notification)
    logger.info("Seeded sample notifications", extra={"user_id": user_id})
    return await storage.get_notifications(user_id, user_type)


async def list_referrals(storage: Storage, referrer_id: int, seed: bool) -> list[dict]:
    referrals = await storage.get_referrals(referrer_id)
    if referrals or not seed:
        return referrals
    for referral in sample_referrals(referrer_id, datetime.now(timezone.utc)):
        await storage.create_referral(referral)
    logger.info("Seeded sample referrals", extra={"user_id": referrer_id})
    return await storage.get_referrals(referrer_id)


async def create_referral(storage: Storage, data: dict) -> dict:
    return await storage.create_referral({
        "referrer_id": data["referrer_id"],
        "referred_phone_number": data["referred_phone"],
        "referred_name": data.get("referred_name"),
        "status": ReferralStatus.PENDING.value,
    })


async def submit_assessment(storage: Storage, data: dict) -> dict:
    return await storage.create_driver_assessment({
        **data,
        "status": AssessmentStatus.COMPLETED.value,
        "completed_at": datetime.now(timezone.utc),
    })
