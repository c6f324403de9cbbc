"""Accounts — registration, OTP verification, role profiles and the drivers directory.

Invariants:
    - A phone number registers once; re-registering issues a fresh OTP and raises
      ConflictError carrying userId + otpForDemo (login path for the client)
    - Every issued OTP replaces the previous one for that phone
    - Verification creates the initial role profile exactly once
    - Profile upserts require the matching user_type (RoleMismatchError otherwise)
      and mark the user profile_completed

Design Decisions:
    - Settings passed in, not imported: tests flip OTP codes per call
    - Profile defaults applied here, not in schemas: the same body may update an
      existing profile, where "missing" means "use the default text"
"""

import logging
from datetime import datetime, timezone

from signo_connect.config import Settings
from signo_connect.core.domain_types import DirectoryQueryType, UserType
from signo_connect.core.driver_directory import build_directory_entry, search_directory
from signo_connect.core.errors import (
    BusinessRuleError, ConflictError, ErrorContext, InvalidOTPError,
    ResourceNotFoundError, RoleMismatchError,
)
from signo_connect.core.otp import generate_otp, is_otp_valid, otp_expiry
from signo_connect.core.profile_completion import is_local_driver_complete
from signo_connect.core.repository_protocols import Storage

logger = logging.getLogger(__name__)

DEFAULT_DRIVER_ABOUT = "Professional driver looking for opportunities"
DEFAULT_FLEET_OWNER_ABOUT = "Fleet owner looking for reliable drivers"

_USER_FIELDS = ("full_name", "phone_number")


async def _issue_otp(storage: Storage, phone_number: str, settings: Settings) -> str:
    otp = generate_otp(fixed_code=settings.otp_fixed_code)
    await storage.create_otp_verification({
        "phone_number": phone_number,
        "otp": otp,
        "expires_at": otp_expiry(datetime.now(timezone.utc), settings.otp_ttl_minutes),
    })
    return otp


async def register_user(storage: Storage, data: dict, settings: Settings) -> dict:
    """Create the user and issue an OTP for phone verification."""
    phone = data["phone_number"]
    existing = await storage.get_user_by_phone(phone)
    if existing:
        otp = await _issue_otp(storage, phone, settings)
        raise ConflictError(
            "User with this phone number already exists",
            "PHONE_ALREADY_REGISTERED",
            context=ErrorContext(details={
                "userId": existing["id"], "otpForDemo": otp,
                "message": "OTP sent for login",
            }),
        )

    otp = await _issue_otp(storage, phone, settings)
    user = await storage.create_user(data)
    logger.info("User registered", extra={"user_id": user["id"]})
    return {
        "user_id": user["id"],
        "message": "OTP sent to your phone number",
        "otp_for_demo": otp,
    }


async def _ensure_initial_profile(storage: Storage, user: dict) -> None:
    if user["user_type"] == UserType.DRIVER.value:
        if not await storage.get_driver(user["id"]):
            await storage.create_driver({
                "user_id": user["id"],
                "preferred_locations": [],
                "experience": "0",
                "vehicle_types": [],
            })
            logger.info("Initial driver profile created", extra={"user_id": user["id"]})
    elif user["user_type"] == UserType.FLEET_OWNER.value:
        if not await storage.get_fleet_owner(user["id"]):
            await storage.create_fleet_owner({
                "user_id": user["id"],
                "company_name": "",
                "fleet_size": "0",
                "preferred_locations": [],
            })
            logger.info(
                "Initial fleet owner profile created", extra={"user_id": user["id"]},
            )


async def verify_otp(
    storage: Storage, phone_number: str, otp: str, settings: Settings,
) -> dict:
    record = await storage.get_otp_verification(phone_number)
    if not is_otp_valid(
        otp, record, datetime.now(timezone.utc), settings.otp_bypass_code,
    ):
        raise InvalidOTPError()
    if record and record["otp"] == otp:
        await storage.mark_otp_verified(phone_number)

    user = await storage.get_user_by_phone(phone_number)
    if not user:
        raise ResourceNotFoundError("User", phone_number)
    await _ensure_initial_profile(storage, user)
    return {"user_id": user["id"], "user_type": user["user_type"], "verified": True}


async def _require_user(storage: Storage, user_id: int, role: UserType) -> dict:
    user = await storage.get_user(user_id)
    if not user:
        raise ResourceNotFoundError("User", user_id)
    if user["user_type"] != role.value:
        raise RoleMismatchError(user_id, role.value)
    return user


async def _finish_profile(storage: Storage, user: dict, email: str | None) -> dict:
    changes: dict = {"profile_completed": True}
    if email:
        changes["email"] = email
    return await storage.update_user(user["id"], changes) or user


async def save_driver_profile(storage: Storage, data: dict) -> dict:
    """Create or update the driver profile of a driver user."""
    user = await _require_user(storage, data["user_id"], UserType.DRIVER)
    email = data.pop("email", None)
    profile = {
        **data,
        "location": data.get("location") or "",
        "about": data.get("about") or DEFAULT_DRIVER_ABOUT,
        "availability": data.get("availability") or "full-time",
        "skills": data.get("skills") or ["Driving"],
        "profile_image": data.get("profile_image"),
    }
    if await storage.get_driver(user["id"]):
        driver = await storage.update_driver(user["id"], profile)
    else:
        driver = await storage.create_driver(profile)
    updated_user = await _finish_profile(storage, user, email)
    return {**driver, "email": updated_user.get("email")}


async def save_fleet_owner_profile(storage: Storage, data: dict) -> dict:
    """Create or update the company profile of a fleet owner user."""
    user = await _require_user(storage, data["user_id"], UserType.FLEET_OWNER)
    email = data.pop("email", None)
    profile = {
        **data,
        "location": data.get("location") or "",
        "about": data.get("about") or DEFAULT_FLEET_OWNER_ABOUT,
        "business_type": data.get("business_type") or "Transportation",
        "reg_number": data.get("reg_number") or "",
        "profile_image": data.get("profile_image"),
    }
    if await storage.get_fleet_owner(user["id"]):
        owner = await storage.update_fleet_owner(user["id"], profile)
    else:
        owner = await storage.create_fleet_owner(profile)
    updated_user = await _finish_profile(storage, user, email)
    return {**owner, "email": updated_user.get("email")}


async def get_user_with_profile(storage: Storage, user_id: int) -> dict:
    user = await storage.get_user(user_id)
    if not user:
        raise ResourceNotFoundError("User", user_id)
    if user["user_type"] == UserType.DRIVER.value:
        profile = await storage.get_driver(user_id)
    else:
        profile = await storage.get_fleet_owner(user_id)
    return {"user": user, "profile": profile}


def _driver_view(user: dict, driver: dict | None) -> dict:
    driver = driver or {}
    return {
        **{k: v for k, v in driver.items() if k not in ("id", "user_id")},
        "id": user["id"],
        "driver_profile_id": driver.get("id"),
        "full_name": user["full_name"],
        "phone_number": user["phone_number"],
        "email": user.get("email"),
        "profile_completed": user["profile_completed"],
    }


async def _require_driver_user(storage: Storage, user_id: int) -> dict:
    user = await storage.get_user(user_id)
    if not user:
        raise ResourceNotFoundError("Driver", user_id)
    if user["user_type"] != UserType.DRIVER.value:
        raise BusinessRuleError(f"User {user_id} is not a driver", "NOT_A_DRIVER")
    return user


async def get_driver_profile(storage: Storage, user_id: int) -> dict:
    """Merged user + driver view for the driver profile page."""
    user = await _require_driver_user(storage, user_id)
    return _driver_view(user, await storage.get_driver(user_id))


async def update_driver_profile(storage: Storage, user_id: int, changes: dict) -> dict:
    """Apply user and driver field changes, then recompute profile completeness."""
    user = await _require_driver_user(storage, user_id)

    new_phone = changes.get("phone_number")
    if new_phone and new_phone != user["phone_number"]:
        holder = await storage.get_user_by_phone(new_phone)
        if holder and holder["id"] != user_id:
            raise ConflictError(
                "Phone number already in use by another user", "PHONE_IN_USE",
            )

    user_changes = {k: changes[k] for k in _USER_FIELDS if changes.get(k)}
    driver_changes = {
        k: v for k, v in changes.items()
        if k not in _USER_FIELDS and v is not None
    }
    if user_changes:
        user = await storage.update_user(user_id, user_changes) or user

    driver = await storage.get_driver(user_id)
    if driver is None:
        driver = await storage.create_driver({"user_id": user_id, **driver_changes})
    elif driver_changes:
        driver = await storage.update_driver(user_id, driver_changes)

    complete = is_local_driver_complete(user, driver)
    if complete != user["profile_completed"]:
        user = await storage.update_user(user_id, {"profile_completed": complete}) or user
    return _driver_view(user, driver)


async def list_driver_directory(
    storage: Storage,
    qtype: DirectoryQueryType | None,
    q: str | None,
    offset: int,
    limit: int,
) -> tuple[list[dict], int]:
    """Local drivers joined with their users, searched and paginated."""
    users = {u["id"]: u for u in await storage.list_users(UserType.DRIVER.value)}
    entries = [
        build_directory_entry(d, users.get(d["user_id"]))
        for d in await storage.list_drivers()
        if d["user_id"] in users
    ]
    matched = search_directory(entries, qtype, q)
    return matched[offset:offset + limit], len(matched)
