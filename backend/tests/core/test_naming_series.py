"""Naming series — sequential SIG / TR- names."""

from signo_connect.core.naming_series import (
    next_driver_doc_name, next_in_series, next_trip_id,
)


def test_first_name_in_empty_series():
    assert next_driver_doc_name([]) == "SIG00001"
    assert next_trip_id([]) == "TR-00001"


def test_continues_after_highest_not_last():
    assert next_driver_doc_name(["SIG00003", "SIG00010", "SIG00007"]) == "SIG00011"


def test_ignores_names_outside_series():
    assert next_trip_id(["TR-00002", "TRIP-9", "manual", ""]) == "TR-00003"


def test_padding_widens_past_width():
    assert next_in_series(["X99999"], "X") == "X100000"


def test_middle_gaps_stay_but_freed_top_number_returns():
    assert next_trip_id(["TR-00001", "TR-00003"]) == "TR-00004"
    assert next_trip_id(["TR-00001"]) == "TR-00002"
