"""OTP Rules — issuing and checking one-time passwords for phone verification.

Invariants:
    - OTPs are exactly 6 digits
    - A stored OTP is valid only before expires_at and only for its phone number
    - The bypass code (when configured) is accepted for any phone, stored OTP or not

Design Decisions:
    - Clock and RNG injected: deterministic tests without patching datetime/random
    - Naive datetimes treated as UTC: SQLite drops tzinfo on round-trip
"""

import random
from datetime import datetime, timedelta, timezone

OTP_LENGTH = 6


def generate_otp(rng: random.Random | None = None, fixed_code: str | None = None) -> str:
    """Fixed code when configured (demo mode), otherwise a random 6-digit code."""
    if fixed_code:
        return fixed_code
    rng = rng or random.SystemRandom()
    return f"{rng.randrange(10 ** OTP_LENGTH):0{OTP_LENGTH}d}"


def otp_expiry(now: datetime, ttl_minutes: int) -> datetime:
    return now + timedelta(minutes=ttl_minutes)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def is_otp_valid(
    submitted: str,
    record: dict | None,
    now: datetime,
    bypass_code: str | None = None,
) -> bool:
    """Check a submitted OTP against the stored record (or the bypass code)."""
    if bypass_code and submitted == bypass_code:
        return True
    if not record:
        return False
    if record["otp"] != submitted:
        return False
    return _as_utc(record["expires_at"]) > _as_utc(now)
