"""Frappe driver mirror routes — admin CRUD with SIG doc names."""

DRIVER = {"name1": "Ravi Kumar", "phoneNumber": "9876543210", "category": "Heavy"}


async def _create(client, **overrides):
    res = await client.post("/api/frappe-drivers", json={**DRIVER, **overrides})
    assert res.status_code == 201, res.text
    return res.json()


async def test_create_assigns_sequential_doc_names(client):
    first = await _create(client)
    second = await _create(client, phoneNumber="9876500001")
    assert first["docName"] == "SIG00001"
    assert second["docName"] == "SIG00002"
    assert first["isActive"] is True


async def test_duplicate_phone_is_conflict(client):
    await _create(client)
    res = await client.post("/api/frappe-drivers", json=DRIVER)
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "PHONE_ALREADY_REGISTERED"


async def test_list_filters_and_paginates(client):
    await _create(client)
    await _create(client, phoneNumber="9876500001", category="Light", isActive=False)
    await _create(client, phoneNumber="9876500002")

    body = (await client.get("/api/frappe-drivers", params={"category": "Heavy"})).json()
    assert body["total"] == 2
    assert body["offset"] == 0
    assert body["limit"] == 10

    body = (await client.get("/api/frappe-drivers", params={"isActive": "false"})).json()
    assert [d["docName"] for d in body["data"]] == ["SIG00002"]

    body = (await client.get("/api/frappe-drivers", params={"offset": 2, "limit": 1})).json()
    assert body["total"] == 3
    assert [d["docName"] for d in body["data"]] == ["SIG00003"]


async def test_limit_bounds(client):
    assert (await client.get("/api/frappe-drivers", params={"limit": 0})).status_code == 400
    assert (await client.get("/api/frappe-drivers", params={"limit": 101})).status_code == 400


async def test_lookup_by_doc_name_and_phone(client):
    await _create(client)
    assert (await client.get("/api/frappe-drivers/SIG00001")).json()["name1"] == "Ravi Kumar"
    res = await client.get("/api/frappe-drivers/phone/9876543210")
    assert res.json()["docName"] == "SIG00001"
    assert (await client.get("/api/frappe-drivers/SIG09999")).status_code == 404
    assert (await client.get("/api/frappe-drivers/phone/9000000000")).status_code == 404


async def test_patch_updates_fields(client):
    await _create(client)
    res = await client.patch("/api/frappe-drivers/SIG00001", json={"remarks": "night shifts"})
    assert res.status_code == 200
    assert res.json()["remarks"] == "night shifts"
    assert res.json()["category"] == "Heavy"


async def test_patch_to_taken_phone_is_conflict(client):
    await _create(client)
    await _create(client, phoneNumber="9876500001")
    res = await client.patch("/api/frappe-drivers/SIG00001", json={"phoneNumber": "9876500001"})
    assert res.status_code == 409


async def test_patch_unknown_driver(client):
    res = await client.patch("/api/frappe-drivers/SIG00042", json={"remarks": "x"})
    assert res.status_code == 404


async def test_delete_then_gone(client):
    await _create(client)
    res = await client.delete("/api/frappe-drivers/SIG00001")
    assert res.status_code == 204
    assert (await client.delete("/api/frappe-drivers/SIG00001")).status_code == 404


async def test_admin_key_enforced_when_configured(client, settings):
    settings.admin_api_key = "s3cret"
    res = await client.get("/api/frappe-drivers")
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "INVALID_API_KEY"
    res = await client.get("/api/frappe-drivers", headers={"X-API-Key": "wrong"})
    assert res.status_code == 401
    res = await client.get("/api/frappe-drivers", headers={"X-API-Key": "s3cret"})
    assert res.status_code == 200


async def test_mirror_over_database(db_client):
    first = await _create(db_client)
    assert first["docName"] == "SIG00001"
    res = await db_client.patch("/api/frappe-drivers/SIG00001", json={"isActive": False})
    assert res.json()["isActive"] is False
