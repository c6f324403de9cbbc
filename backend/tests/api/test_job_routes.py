"""Job routes — local job postings by fleet owners."""


async def _owner(client, signup):
    return await signup(client, "9000000001", "fleet_owner", name="Anil")


async def test_post_job_requires_fleet_owner_profile(client):
    res = await client.post("/api/jobs", json={
        "fleetOwnerId": 1, "title": "Driver", "location": "Pune",
    })
    assert res.status_code == 404


async def test_post_and_fetch_job(client, signup):
    owner = await _owner(client, signup)
    res = await client.post("/api/jobs", json={
        "fleetOwnerId": owner, "title": "Heavy vehicle driver",
        "location": "Pune, Maharashtra", "salary": "₹25,000",
        "requirements": ["Heavy licence"],
    })
    assert res.status_code == 201
    job = res.json()
    assert job["isActive"] is True
    assert job["requirements"] == ["Heavy licence"]

    fetched = (await client.get(f"/api/jobs/{job['id']}")).json()
    assert fetched["title"] == "Heavy vehicle driver"


async def test_jobs_by_location_substring(client, signup):
    owner = await _owner(client, signup)
    for location in ("Pune, Maharashtra", "New Delhi"):
        await client.post("/api/jobs", json={
            "fleetOwnerId": owner, "title": "Driver", "location": location,
        })
    res = await client.get("/api/jobs", params={"location": "PUNE"})
    assert [j["location"] for j in res.json()] == ["Pune, Maharashtra"]


async def test_jobs_listing_requires_location(client):
    assert (await client.get("/api/jobs")).status_code == 400


async def test_patch_job_deactivates(client, signup):
    owner = await _owner(client, signup)
    job = (await client.post("/api/jobs", json={
        "fleetOwnerId": owner, "title": "Driver", "location": "Pune",
    })).json()
    res = await client.patch(f"/api/jobs/{job['id']}", json={"isActive": False})
    assert res.status_code == 200
    assert res.json()["isActive"] is False
    assert res.json()["title"] == "Driver"


async def test_unknown_job(client):
    assert (await client.get("/api/jobs/5")).status_code == 404
    assert (await client.patch("/api/jobs/5", json={"title": "x"})).status_code == 404


async def test_fleet_owner_jobs(client, signup):
    owner = await _owner(client, signup)
    await client.post("/api/jobs", json={
        "fleetOwnerId": owner, "title": "Driver", "location": "Pune",
    })
    res = await client.get(f"/api/fleet-owner/{owner}/jobs")
    assert len(res.json()) == 1
    assert (await client.get("/api/fleet-owner/99/jobs")).json() == []


async def test_jobs_over_database(db_client, signup):
    owner = await _owner(db_client, signup)
    res = await db_client.post("/api/jobs", json={
        "fleetOwnerId": owner, "title": "Driver", "location": "Nagpur",
    })
    assert res.status_code == 201
    res = await db_client.get("/api/jobs", params={"location": "nag"})
    assert len(res.json()) == 1


async def _null_patch_keeps_job(api, signup):
    owner = await _owner(api, signup)
    job = (await api.post("/api/jobs", json={
        "fleetOwnerId": owner, "title": "Driver", "location": "Pune",
    })).json()
    res = await api.patch(
        f"/api/jobs/{job['id']}", json={"title": None, "isActive": None, "salary": "₹30,000"},
    )
    assert res.status_code == 200, res.text
    body = res.json()
    assert body["title"] == "Driver"
    assert body["isActive"] is True
    assert body["salary"] == "₹30,000"


async def test_null_fields_in_patch_leave_job_untouched(client, signup):
    await _null_patch_keeps_job(client, signup)


async def test_null_fields_in_patch_leave_job_untouched_over_database(db_client, signup):
    await _null_patch_keeps_job(db_client, signup)
