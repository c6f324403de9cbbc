"""Driver Directory — filtering drivers for transporters (Frappe) and the local directory.

Invariants:
    - Frappe drivers below min_completion percent are never listed
    - Search is a case-insensitive substring of name1 or of address, each on its own
    - Tags compare lowercased; they match when ANY selected tag is among the driver's tags
    - A driver's tags are its comma-separated catagory values (trimmed, lowercased) plus
      "kyc_verified" / "kyc_pending" from is_kyc_verfied
    - Local directory search (qtype/q) is a case-insensitive substring match

Design Decisions:
    - Completion attached to each returned Frappe driver as "profile_completion"
      so clients need not recompute it
"""

from signo_connect.core.domain_types import DirectoryQueryType
from signo_connect.core.profile_completion import driver_completion

KYC_VERIFIED = "kyc_verified"
KYC_PENDING = "kyc_pending"


def driver_tags(driver: dict) -> set[str]:
    tags = {
        part.strip().lower()
        for part in (driver.get("catagory") or "").split(",")
        if part.strip()
    }
    tags.add(KYC_VERIFIED if driver.get("is_kyc_verfied") else KYC_PENDING)
    return tags


def filter_frappe_drivers(
    drivers: list[dict],
    search: str | None = None,
    tags: list[str] | None = None,
    min_completion: int = 60,
) -> list[dict]:
    """Drivers eligible for the transporter directory, with profile_completion."""
    needle = (search or "").strip().lower()
    wanted = {t.strip().lower() for t in (tags or []) if t and t.strip()}
    result = []
    for driver in drivers:
        completion = driver_completion(driver)
        if completion < min_completion:
            continue
        if needle:
            fields = (driver.get("name1") or "", driver.get("address") or "")
            if not any(needle in field.lower() for field in fields):
                continue
        if wanted and not (wanted & driver_tags(driver)):
            continue
        result.append({**driver, "profile_completion": completion})
    return result


def _directory_field(entry: dict, qtype: DirectoryQueryType) -> str:
    if qtype is DirectoryQueryType.NAME:
        return entry.get("full_name") or ""
    if qtype is DirectoryQueryType.LOCATION:
        return " ".join(
            [entry.get("location") or ""] + list(entry.get("preferred_locations") or []),
        )
    if qtype is DirectoryQueryType.VEHICLE_TYPE:
        return " ".join(entry.get("vehicle_types") or [])
    return entry.get("availability") or ""


def build_directory_entry(driver: dict, user: dict | None) -> dict:
    """Driver profile joined with the owning user's public fields."""
    user = user or {}
    return {
        **driver,
        "full_name": user.get("full_name"),
        "phone_number": user.get("phone_number"),
        "email": user.get("email"),
        "profile_completed": user.get("profile_completed", False),
    }


def search_directory(
    entries: list[dict],
    qtype: DirectoryQueryType | None = None,
    q: str | None = None,
) -> list[dict]:
    if not qtype or not q:
        return entries
    needle = q.lower()
    return [e for e in entries if needle in _directory_field(e, qtype).lower()]
