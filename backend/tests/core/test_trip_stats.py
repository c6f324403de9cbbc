"""Trip stats — derived trip fields and the per-driver summary."""

from datetime import datetime, timezone

from signo_connect.core.trip_stats import compute_trip_summary, derive_trip_fields

NOW = datetime(2025, 6, 1, 8, 0, tzinfo=timezone.utc)


def test_new_trip_pending_is_cost_minus_paid():
    derived = derive_trip_fields({"trip_cost": 5000, "paid_amount": 2000}, None, NOW)
    assert derived["pending_amount"] == 3000


def test_pending_never_negative():
    derived = derive_trip_fields({"trip_cost": 1000, "paid_amount": 1500}, None, NOW)
    assert derived["pending_amount"] == 0


def test_null_pending_on_create_falls_back_to_cost_minus_paid():
    derived = derive_trip_fields(
        {"trip_cost": 5000, "paid_amount": 2000, "pending_amount": None}, None, NOW,
    )
    assert derived["pending_amount"] == 3000


def test_explicit_pending_is_kept():
    derived = derive_trip_fields(
        {"trip_cost": 1000, "paid_amount": 0, "pending_amount": 200}, None, NOW,
    )
    assert derived["pending_amount"] == 200


def test_update_recomputes_pending_only_when_money_changes():
    existing = {"trip_cost": 5000, "paid_amount": 1000, "pending_amount": 4000,
                "status": "upcoming"}
    assert "pending_amount" not in derive_trip_fields({"origin": "Pune"}, existing, NOW)
    assert derive_trip_fields({"paid_amount": 4500}, existing, NOW)["pending_amount"] == 500


def test_in_progress_stamps_started_on_once():
    existing = {"trip_cost": 1, "status": "upcoming", "started_on": None}
    assert derive_trip_fields({"status": "in-progress"}, existing, NOW)["started_on"] == NOW
    started = {**existing, "started_on": NOW}
    assert "started_on" not in derive_trip_fields({"status": "in-progress"}, started, NOW)


def test_completed_stamps_ended_on():
    derived = derive_trip_fields({"status": "completed"}, {"trip_cost": 1}, NOW)
    assert derived["ended_on"] == NOW


def test_summary_of_no_trips():
    summary = compute_trip_summary([])
    assert summary["total_trips"] == 0
    assert summary["average_rating"] is None
    assert summary["status_counts"]["in-progress"] == 0


def test_summary_counts_and_money():
    trips = [
        {"status": "completed", "trip_cost": 5000, "paid_amount": 5000,
         "pending_amount": 0, "distance_km": 150, "rating": 4},
        {"status": "in-progress", "trip_cost": 3000, "paid_amount": 1000,
         "pending_amount": 2000, "distance_km": 80, "rating": None},
        {"status": "cancelled", "trip_cost": 2000, "paid_amount": 500,
         "pending_amount": 1500, "distance_km": 40, "rating": 5},
    ]
    summary = compute_trip_summary(trips)
    assert summary["total_trips"] == 3
    assert summary["status_counts"]["completed"] == 1
    assert summary["status_counts"]["cancelled"] == 1
    assert summary["total_earnings"] == 5000
    assert summary["total_paid"] == 6000
    assert summary["total_pending"] == 2000
    assert summary["total_distance_km"] == 150
    assert summary["average_rating"] == 4.5
