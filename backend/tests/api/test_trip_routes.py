"""Trip routes — trip log CRUD with generated ids and the driver summary."""

TRIP = {
    "vehicleId": "MH12AB1234", "driverId": 7, "transporterId": 3,
    "origin": "Pune", "destination": "Mumbai", "tripCost": 5000, "paidAmount": 2000,
}


async def _create(client, **overrides):
    res = await client.post("/api/trips", json={**TRIP, **overrides})
    assert res.status_code == 201, res.text
    return res.json()


async def test_create_generates_trip_id_and_pending(client):
    first = await _create(client)
    second = await _create(client)
    assert first["tripId"] == "TR-00001"
    assert second["tripId"] == "TR-00002"
    assert first["driverId"] == "7"
    assert first["pendingAmount"] == 3000
    assert first["status"] == "upcoming"


async def test_list_requires_driver_or_transporter(client):
    res = await client.get("/api/trips")
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_list_by_driver_and_transporter(client):
    await _create(client)
    await _create(client, driverId="8", transporterId="4")
    by_driver = (await client.get("/api/trips", params={"driver_id": "7"})).json()
    assert [t["driverId"] for t in by_driver] == ["7"]
    by_transporter = (await client.get("/api/trips", params={"transporter_id": "4"})).json()
    assert [t["driverId"] for t in by_transporter] == ["8"]


async def test_start_and_complete_stamp_times(client):
    trip = await _create(client)
    res = await client.put(f"/api/trips/{trip['id']}", json={"status": "in-progress"})
    assert res.status_code == 200
    assert res.json()["startedOn"] is not None
    res = await client.put(
        f"/api/trips/{trip['id']}", json={"status": "completed", "paidAmount": 5000},
    )
    body = res.json()
    assert body["endedOn"] is not None
    assert body["pendingAmount"] == 0


async def test_negative_cost_rejected(client):
    res = await client.post("/api/trips", json={**TRIP, "tripCost": -1})
    assert res.status_code == 400


async def test_unknown_trip(client):
    assert (await client.get("/api/trips/99")).status_code == 404
    assert (await client.put("/api/trips/99", json={"origin": "Nashik"})).status_code == 404
    assert (await client.delete("/api/trips/99")).status_code == 404


async def test_delete_trip(client):
    trip = await _create(client)
    assert (await client.delete(f"/api/trips/{trip['id']}")).json() == {"success": True}
    assert (await client.get(f"/api/trips/{trip['id']}")).status_code == 404


async def test_summary_route_not_shadowed_by_trip_id(client):
    await _create(client, status="completed", distanceKm=150, rating=4)
    await _create(client, status="cancelled", tripCost=1000, paidAmount=0)
    res = await client.get("/api/trips/summary", params={"driver_id": "7"})
    assert res.status_code == 200
    body = res.json()
    assert body["totalTrips"] == 2
    assert body["statusCounts"]["completed"] == 1
    assert body["statusCounts"]["in-progress"] == 0
    assert body["totalEarnings"] == 5000
    assert body["totalDistanceKm"] == 150
    assert body["averageRating"] == 4


async def test_trips_over_database(db_client):
    trip = await _create(db_client)
    res = await db_client.put(f"/api/trips/{trip['id']}", json={"status": "in-progress"})
    assert res.json()["startedOn"] is not None
    res = await db_client.get("/api/trips/summary", params={"driver_id": "7"})
    assert res.json()["statusCounts"]["in-progress"] == 1


async def test_null_status_update_keeps_trip_status(client):
    trip = await _create(client)
    res = await client.put(f"/api/trips/{trip['id']}", json={"status": None, "origin": "Nashik"})
    assert res.status_code == 200
    assert res.json()["status"] == "upcoming"
    assert res.json()["origin"] == "Nashik"


async def test_null_status_update_over_database(db_client):
    trip = await _create(db_client)
    res = await db_client.put(f"/api/trips/{trip['id']}", json={"status": None, "rating": None})
    assert res.status_code == 200, res.text
    assert res.json()["status"] == "upcoming"
    assert res.json()["pendingAmount"] == 3000


async def test_pending_defaults_over_database(db_client):
    trip = await _create(db_client, tripCost=8000, paidAmount=500)
    assert trip["pendingAmount"] == 7500
