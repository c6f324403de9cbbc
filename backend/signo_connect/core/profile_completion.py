"""Profile Completion — weighted completeness scores for driver and transporter profiles.

Invariants:
    - Percentages are integers 0-100, rounded half up
    - Driver (Frappe record) weights sum to 100; transporter weights sum to 100
    - A driver field counts when it is not None and not ""; a transporter string
      field counts when non-blank after strip, other values when not None
    - missing_items keeps the declaration order of TRANSPORTER_FIELDS
    - Local driver completeness (is_local_driver_complete) is all-or-nothing

Design Decisions:
    - Weights as module-level tuples: single place to tune, readable in tests
    - Field name "catagory" kept as spelled by the Frappe Drivers doctype
"""

import math

DRIVER_FIELD_WEIGHTS: tuple[tuple[str, int], ...] = (
    ("name1", 20),
    ("phone_number", 20),
    ("catagory", 15),
    ("dl_number", 15),
    ("experience", 10),
    ("address", 10),
    ("aadhar_number", 10),
)

# (field, weight, label shown to the transporter)
TRANSPORTER_FIELDS: tuple[tuple[str, int, str], ...] = (
    ("name1", 15, "Full Name"),
    ("company_name", 15, "Company Name"),
    ("phone_number", 15, "Phone Number"),
    ("address", 10, "Address"),
    ("gst", 15, "GST Number"),
    ("pan", 10, "PAN Number"),
    ("fleet_size", 10, "Fleet Size"),
    ("logo_pic", 10, "Company Logo"),
)


def _percent(earned: int, total: int) -> int:
    if total <= 0:
        return 0
    return int(math.floor(earned * 100 / total + 0.5))


def _driver_field_present(value: object) -> bool:
    return value is not None and value != ""


def _transporter_field_present(value: object) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    return value is not None


def driver_completion(driver: dict) -> int:
    """Completion percentage of a Frappe driver record."""
    total = sum(w for _, w in DRIVER_FIELD_WEIGHTS)
    earned = sum(
        w for field, w in DRIVER_FIELD_WEIGHTS
        if _driver_field_present(driver.get(field))
    )
    return _percent(earned, total)


def transporter_completion(profile: dict | None) -> dict:
    """Completion percentage and missing field labels of a transporter profile."""
    profile = profile or {}
    total = sum(w for _, w, _ in TRANSPORTER_FIELDS)
    earned = 0
    missing: list[str] = []
    for field, weight, label in TRANSPORTER_FIELDS:
        if _transporter_field_present(profile.get(field)):
            earned += weight
        else:
            missing.append(label)
    return {
        "completion_percentage": _percent(earned, total),
        "missing_items": missing,
    }


def is_local_driver_complete(user: dict, driver: dict | None) -> bool:
    """Name, phone, preferred locations, experience and vehicle types all present."""
    if not driver:
        return False
    return bool(
        user.get("full_name")
        and user.get("phone_number")
        and driver.get("preferred_locations")
        and driver.get("experience")
        and driver.get("vehicle_types")
    )
