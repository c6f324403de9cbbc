"""Engagement routes — notifications, referrals and driver assessments."""


async def test_empty_notifications_seeded_once(client):
    params = {"user_id": 1, "user_type": "driver"}
    res = await client.get("/api/notifications", params=params)
    assert res.status_code == 200
    titles = [n["title"] for n in res.json()["data"]]
    assert titles == ["Payment Received", "Pending Document Verification", "New Job Posted"]

    again = (await client.get("/api/notifications", params=params)).json()["data"]
    assert len(again) == 3


async def test_notifications_not_seeded_when_disabled(client, settings):
    settings.seed_demo_data = False
    res = await client.get("/api/notifications", params={"user_id": 1, "user_type": "driver"})
    assert res.json()["data"] == []


async def test_create_and_read_notification(client, settings):
    settings.seed_demo_data = False
    res = await client.post("/api/notifications", json={
        "userId": 2, "userType": "fleet_owner", "title": "Driver applied",
        "content": "Ravi applied to your job", "type": "job",
    })
    assert res.status_code == 201
    notification = res.json()["data"]
    assert notification["read"] is False

    res = await client.post(f"/api/read-notification/{notification['id']}")
    assert res.json()["data"]["read"] is True

    listed = await client.get(
        "/api/notifications", params={"user_id": 2, "user_type": "fleet_owner"},
    )
    assert [n["title"] for n in listed.json()["data"]] == ["Driver applied"]


async def test_read_unknown_notification(client):
    assert (await client.post("/api/read-notification/42")).status_code == 404


async def test_referrals_seeded_for_new_referrer(client):
    res = await client.get("/api/referrals", params={"driver_id": 5})
    referrals = res.json()["data"]
    assert [r["referredName"] for r in referrals] == [
        "Rahul Kumar", "Suresh Singh", "Amit Patel",
    ]
    assert referrals[0]["reward"] == "₹500"


async def test_create_referral_is_pending(client, settings):
    settings.seed_demo_data = False
    res = await client.post("/api/referrals", json={
        "referrerId": 5, "referredPhone": "9876501234", "referredName": "Vikram",
    })
    assert res.status_code == 201
    referral = res.json()["data"]
    assert referral["referredPhoneNumber"] == "9876501234"
    assert referral["status"] == "pending"

    listed = (await client.get("/api/referrals", params={"driver_id": 5})).json()["data"]
    assert len(listed) == 1


async def test_submit_assessment_marks_completed(client):
    res = await client.post("/api/submit-assessment", json={
        "driverId": 9, "assessmentType": "safety", "score": 82,
    })
    assert res.status_code == 201
    assessment = res.json()["data"]
    assert assessment["status"] == "completed"
    assert assessment["completedAt"] is not None

    res = await client.get(
        "/api/driver-assessments", params={"driver_id": 9, "status": "completed"},
    )
    assert [a["score"] for a in res.json()["data"]] == [82]
    res = await client.get(
        "/api/driver-assessments", params={"driver_id": 9, "status": "pending"},
    )
    assert res.json()["data"] == []


async def test_assessment_score_out_of_range(client):
    res = await client.post("/api/submit-assessment", json={
        "driverId": 9, "assessmentType": "safety", "score": 120,
    })
    assert res.status_code == 400


async def test_engagement_over_database(db_client):
    res = await db_client.get("/api/notifications", params={"user_id": 1, "user_type": "driver"})
    assert len(res.json()["data"]) == 3
    res = await db_client.get("/api/referrals", params={"driver_id": 1})
    assert len(res.json()["data"]) == 3
