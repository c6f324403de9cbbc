"""Document routes — uploads, verification and vehicle types."""

DOC = {
    "documentId": "DL-0001", "userId": 1, "type": "driving_license",
    "documentNumber": "MH12 2019 0001234", "frontImage": "https://cdn.test/dl.jpg",
}


async def test_create_and_list_documents(client):
    res = await client.post("/api/documents", json=DOC)
    assert res.status_code == 201
    document = res.json()["document"]
    assert document["documentId"] == "DL-0001"
    assert document["isVerified"] is False

    res = await client.get("/api/user/1/documents")
    assert [d["documentId"] for d in res.json()["documents"]] == ["DL-0001"]


async def test_duplicate_document_id_is_conflict(client):
    await client.post("/api/documents", json=DOC)
    res = await client.post("/api/documents", json=DOC)
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "DOCUMENT_EXISTS"


async def test_unknown_document_type_rejected(client):
    res = await client.post("/api/documents", json={**DOC, "type": "passport_photo"})
    assert res.status_code == 400


async def test_update_document(client):
    pk = (await client.post("/api/documents", json=DOC)).json()["document"]["id"]
    res = await client.put(f"/api/documents/{pk}", json={"remarks": "blurry"})
    assert res.status_code == 200
    assert res.json()["document"]["remarks"] == "blurry"
    assert res.json()["document"]["documentNumber"] == "MH12 2019 0001234"


async def test_verify_stamps_verifier_and_time(client):
    pk = (await client.post("/api/documents", json=DOC)).json()["document"]["id"]
    res = await client.post(f"/api/documents/{pk}/verify", json={"verifiedBy": "admin"})
    document = res.json()["document"]
    assert document["isVerified"] is True
    assert document["verifiedBy"] == "admin"
    assert document["verifiedAt"] is not None


async def test_delete_document_then_missing(client):
    pk = (await client.post("/api/documents", json=DOC)).json()["document"]["id"]
    assert (await client.delete(f"/api/documents/{pk}")).json() == {"success": True}
    assert (await client.get(f"/api/documents/{pk}")).status_code == 404
    assert (await client.delete(f"/api/documents/{pk}")).status_code == 404


async def test_vehicle_types_only_active_listed(client):
    res = await client.post("/api/vehicle-types", json={"vehicleType": "Truck"})
    assert res.status_code == 201
    type_id = res.json()["vehicleType"]["id"]
    await client.post("/api/vehicle-types", json={"vehicleType": "Bullock cart", "isActive": False})

    listed = (await client.get("/api/vehicle-types")).json()["vehicleTypes"]
    assert [t["vehicleType"] for t in listed] == ["Truck"]
    res = await client.get(f"/api/vehicle-types/{type_id}")
    assert res.json()["vehicleType"]["vehicleType"] == "Truck"


async def test_duplicate_vehicle_type_is_conflict(client):
    await client.post("/api/vehicle-types", json={"vehicleType": "Truck"})
    res = await client.post("/api/vehicle-types", json={"vehicleType": "Truck"})
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "VEHICLE_TYPE_EXISTS"


async def test_documents_over_database(db_client):
    res = await db_client.post("/api/documents", json={**DOC, "expiryDate": "2030-01-31T00:00:00Z"})
    assert res.status_code == 201
    pk = res.json()["document"]["id"]
    res = await db_client.post(f"/api/documents/{pk}/verify", json={"verifiedBy": "ops"})
    assert res.json()["document"]["isVerified"] is True


async def test_null_document_type_is_ignored_over_database(db_client):
    pk = (await db_client.post("/api/documents", json=DOC)).json()["document"]["id"]
    res = await db_client.put(f"/api/documents/{pk}", json={"type": None, "remarks": "Renewed"})
    assert res.status_code == 200, res.text
    res = await db_client.get(f"/api/documents/{pk}")
    assert res.json()["document"]["type"] == "driving_license"
