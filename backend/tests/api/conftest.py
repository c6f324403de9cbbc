"""API test fixtures — FastAPI app over fresh storage, fixed settings and a fake Frappe.

Invariants:
    - Every test gets its own MemoryStorage (no state shared through the singleton)
    - db_client runs the same app over DatabaseStorage on in-memory SQLite
    - Settings overridden per test: OTP codes fixed at 123456, seeding on

Design Decisions:
    - Dependency overrides instead of environment patching: lru_cached settings
      stay untouched between tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from signo_connect.api.dependencies import get_frappe, get_storage
from signo_connect.config import Settings, get_settings
from signo_connect.infrastructure.database_storage import DatabaseStorage
from signo_connect.infrastructure.memory_storage import MemoryStorage
from signo_connect.main import app


@pytest.fixture
def settings():
    return Settings(
        storage_backend="memory",
        seed_demo_data=True,
        otp_bypass_code="123456",
        otp_fixed_code="123456",
        admin_api_key=None,
    )


@pytest.fixture
def storage():
    return MemoryStorage()


async def _client(settings, frappe):
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_frappe] = lambda: frappe
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.fixture
async def client(storage, settings, frappe):
    """Test client over a fresh MemoryStorage."""
    app.dependency_overrides[get_storage] = lambda: storage
    async with await _client(settings, frappe) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def db_client(test_session_factory, settings, frappe):
    """Test client over DatabaseStorage on in-memory SQLite."""
    async def override_get_storage():
        async with test_session_factory() as session:
            yield DatabaseStorage(session)

    app.dependency_overrides[get_storage] = override_get_storage
    async with await _client(settings, frappe) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def signup():
    """Register + verify a user through the API; the helper returns the user id."""
    async def _signup(client, phone: str, user_type: str, name: str = "Ravi Kumar") -> int:
        res = await client.post("/api/register", json={
            "fullName": name, "phoneNumber": phone, "userType": user_type,
        })
        assert res.status_code == 200, res.text
        user_id = res.json()["userId"]
        res = await client.post(
            "/api/verify-otp", json={"phoneNumber": phone, "otp": "123456"},
        )
        assert res.status_code == 200, res.text
        return user_id
    return _signup
