"""Registration routes — sign-up, OTP verification and the login path."""


async def test_register_returns_user_and_demo_otp(client):
    res = await client.post("/api/register", json={
        "fullName": "Ravi Kumar", "phoneNumber": "9876543210", "userType": "driver",
    })
    assert res.status_code == 200
    body = res.json()
    assert body["userId"] == 1
    assert body["otpForDemo"] == "123456"
    assert body["message"] == "OTP sent to your phone number"


async def test_repeat_registration_is_conflict_with_login_details(client, signup):
    user_id = await signup(client, "9876543210", "driver")
    res = await client.post("/api/register", json={
        "fullName": "Ravi Kumar", "phoneNumber": "9876543210", "userType": "driver",
    })
    assert res.status_code == 409
    error = res.json()["error"]
    assert error["code"] == "PHONE_ALREADY_REGISTERED"
    assert error["details"]["userId"] == user_id
    assert error["details"]["otpForDemo"] == "123456"


async def test_register_rejects_short_phone_and_unknown_role(client):
    res = await client.post("/api/register", json={
        "fullName": "Ravi", "phoneNumber": "123", "userType": "driver",
    })
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"
    res = await client.post("/api/register", json={
        "fullName": "Ravi", "phoneNumber": "9876543210", "userType": "admin",
    })
    assert res.status_code == 400


async def test_verify_creates_initial_driver_profile(client, storage):
    await client.post("/api/register", json={
        "fullName": "Ravi", "phoneNumber": "9876543210", "userType": "driver",
    })
    res = await client.post(
        "/api/verify-otp", json={"phoneNumber": "9876543210", "otp": "123456"},
    )
    assert res.status_code == 200
    assert res.json() == {"userId": 1, "userType": "driver", "verified": True}
    driver = await storage.get_driver(1)
    assert driver["experience"] == "0"


async def test_verify_twice_keeps_single_profile(client, storage, signup):
    await signup(client, "9876543210", "fleet_owner")
    res = await client.post(
        "/api/verify-otp", json={"phoneNumber": "9876543210", "otp": "123456"},
    )
    assert res.status_code == 200
    owner = await storage.get_fleet_owner(1)
    assert owner["id"] == 1


async def test_wrong_otp_rejected(client, settings):
    settings.otp_bypass_code = None
    await client.post("/api/register", json={
        "fullName": "Ravi", "phoneNumber": "9876543210", "userType": "driver",
    })
    res = await client.post(
        "/api/verify-otp", json={"phoneNumber": "9876543210", "otp": "000000"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "INVALID_OTP"


async def test_bypass_code_for_unknown_phone_is_not_found(client):
    res = await client.post(
        "/api/verify-otp", json={"phoneNumber": "9000000000", "otp": "123456"},
    )
    assert res.status_code == 404


async def test_registration_over_database_storage(db_client, signup):
    user_id = await signup(db_client, "9876543210", "driver")
    res = await db_client.get(f"/api/user/{user_id}")
    assert res.status_code == 200
    assert res.json()["profile"]["userId"] == user_id
