"""OTP rules — generation, expiry and validation, with injected clock and RNG."""

import random
from datetime import datetime, timedelta, timezone

from signo_connect.core.otp import generate_otp, is_otp_valid, otp_expiry

NOW = datetime(2025, 5, 1, 12, 0, tzinfo=timezone.utc)


def _record(otp="482913", minutes_left=10):
    return {"phone_number": "9876543210", "otp": otp,
            "expires_at": NOW + timedelta(minutes=minutes_left)}


def test_fixed_code_wins_over_random():
    assert generate_otp(fixed_code="123456") == "123456"


def test_random_otp_is_six_digits_and_seeded():
    a = generate_otp(rng=random.Random(42))
    b = generate_otp(rng=random.Random(42))
    assert a == b
    assert len(a) == 6 and a.isdigit()


def test_expiry_adds_ttl():
    assert otp_expiry(NOW, 15) == NOW + timedelta(minutes=15)


def test_matching_unexpired_record_is_valid():
    assert is_otp_valid("482913", _record(), NOW)


def test_wrong_code_is_invalid():
    assert not is_otp_valid("000000", _record(), NOW)


def test_expired_record_is_invalid():
    assert not is_otp_valid("482913", _record(minutes_left=-1), NOW)


def test_missing_record_is_invalid_without_bypass():
    assert not is_otp_valid("482913", None, NOW)


def test_bypass_code_accepted_without_record():
    assert is_otp_valid("123456", None, NOW, bypass_code="123456")


def test_bypass_disabled_when_none():
    assert not is_otp_valid("123456", None, NOW, bypass_code=None)


def test_naive_expiry_treated_as_utc():
    record = _record()
    record["expires_at"] = record["expires_at"].replace(tzinfo=None)
    assert is_otp_valid("482913", record, NOW)
