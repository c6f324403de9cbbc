"""Trip Stats — trip field derivation and per-driver summary statistics.

Invariants:
    - pending_amount defaults to max(trip_cost - paid_amount, 0) when absent or null
    - Entering "in-progress" stamps started_on, entering "completed" stamps ended_on,
      unless the caller supplied them
    - Summary earnings count completed trips only; cancelled trips count nowhere
      except status_counts and total_trips
    - average_rating is None when no trip is rated
    - Pure: clock injected, no IO

Design Decisions:
    - derive_trip_fields works on the merged (existing + changes) record so create
      and update share one rule set
"""

from datetime import datetime

from signo_connect.core.domain_types import TripStatus


def derive_trip_fields(
    changes: dict, existing: dict | None, now: datetime,
) -> dict:
    """Return changes plus derived pending_amount / started_on / ended_on."""
    merged = {**(existing or {}), **changes}
    derived = dict(changes)

    money_changed = "trip_cost" in changes or "paid_amount" in changes
    if changes.get("pending_amount") is None and (existing is None or money_changed):
        cost = merged.get("trip_cost") or 0
        paid = merged.get("paid_amount") or 0
        derived["pending_amount"] = max(cost - paid, 0)

    status = merged.get("status")
    if status == TripStatus.IN_PROGRESS.value and not merged.get("started_on"):
        derived["started_on"] = now
    if status == TripStatus.COMPLETED.value and not merged.get("ended_on"):
        derived["ended_on"] = now
    return derived


def compute_trip_summary(trips: list[dict]) -> dict:
    """Summary numbers for a driver's trips page."""
    status_counts = {s.value: 0 for s in TripStatus}
    for trip in trips:
        status = trip.get("status")
        if status in status_counts:
            status_counts[status] += 1

    billable = [t for t in trips if t.get("status") != TripStatus.CANCELLED.value]
    completed = [t for t in trips if t.get("status") == TripStatus.COMPLETED.value]
    ratings = [t["rating"] for t in trips if t.get("rating") is not None]

    return {
        "total_trips": len(trips),
        "status_counts": status_counts,
        "total_earnings": sum(t.get("trip_cost") or 0 for t in completed),
        "total_paid": sum(t.get("paid_amount") or 0 for t in billable),
        "total_pending": sum(t.get("pending_amount") or 0 for t in billable),
        "total_distance_km": sum(t.get("distance_km") or 0 for t in completed),
        "average_rating": (
            round(sum(ratings) / len(ratings), 2) if ratings else None
        ),
    }
