"""Registration — phone sign-up and OTP verification.

Invariants:
    - A repeat registration answers 409 with userId + otpForDemo in error details
    - /verify-otp creates the initial role profile on first success
"""

import logging

from fastapi import APIRouter, Depends

from signo_connect.api.dependencies import get_storage
from signo_connect.config import Settings, get_settings
from signo_connect.core.repository_protocols import Storage
from signo_connect.schemas.accounts import RegisterRequest, VerifyOtpRequest
from signo_connect.schemas.base import camelize
from signo_connect.services import accounts

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["registration"])


@router.post("/register")
async def register(
    body: RegisterRequest,
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
):
    """Register a driver or fleet owner and send an OTP."""
    result = await accounts.register_user(storage, body.to_record(), settings)
    return camelize(result)


@router.post("/verify-otp")
async def verify_otp(
    body: VerifyOtpRequest,
    storage: Storage = Depends(get_storage),
    settings: Settings = Depends(get_settings),
):
    result = await accounts.verify_otp(
        storage, body.phone_number, body.otp, settings,
    )
    return camelize(result)
