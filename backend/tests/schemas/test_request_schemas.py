"""Request schemas — camelCase aliases, trimming and id coercion."""

import pytest
from pydantic import ValidationError

from signo_connect.schemas.accounts import RegisterRequest
from signo_connect.schemas.base import camelize
from signo_connect.schemas.frappe import TransporterJobCreate
from signo_connect.schemas.trips import TripCreate, TripUpdate
from signo_connect.schemas.vehicles import ChecklistCreate


def test_register_accepts_camel_and_snake_case():
    camel = RegisterRequest.model_validate({
        "fullName": "  Ravi  ", "phoneNumber": "9876543210", "userType": "driver",
    })
    snake = RegisterRequest.model_validate({
        "full_name": "Ravi", "phone_number": "9876543210", "user_type": "driver",
    })
    assert camel.full_name == "Ravi"
    assert camel.to_record() == snake.to_record()
    assert camel.to_record()["user_type"] == "driver"


def test_register_rejects_blank_name():
    with pytest.raises(ValidationError):
        RegisterRequest.model_validate({
            "fullName": "   ", "phoneNumber": "9876543210", "userType": "driver",
        })


def test_numeric_ids_stored_as_text():
    trip = TripCreate.model_validate({
        "vehicleId": 12, "driverId": 7, "transporterId": 3,
        "origin": "Pune", "destination": "Mumbai", "tripCost": 10,
    })
    assert (trip.vehicle_id, trip.driver_id, trip.transporter_id) == ("12", "7", "3")
    assert ChecklistCreate.model_validate({"item": "Jack", "tripId": 4}).trip_id == "4"


def test_changes_keep_only_sent_fields():
    update = TripUpdate.model_validate({"origin": "Pune", "tripCost": 10})
    assert update.to_changes() == {"origin": "Pune", "trip_cost": 10}


def test_changes_skip_explicit_nulls():
    update = TripUpdate.model_validate({"status": None, "rating": None, "origin": "Pune"})
    assert update.to_changes() == {"origin": "Pune"}


def test_blank_requirements_dropped():
    job = TransporterJobCreate.model_validate({
        "transporter": "TRN-1", "title": "Driver", "salary": "1", "city": "Pune",
        "requirements": [" Licence ", ""],
    })
    assert job.requirements == ["Licence"]


def test_camelize_nested_and_leaves_non_identifier_keys():
    value = {"status_counts": {"in-progress": 1}, "rows": [{"trip_id": "TR-1"}]}
    assert camelize(value) == {
        "statusCounts": {"in-progress": 1}, "rows": [{"tripId": "TR-1"}],
    }
