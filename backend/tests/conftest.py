"""Root conftest — shared test configuration.

Invariants:
    - Tests never reach a real database or the real Frappe server
    - Database-backed tests get a fresh in-memory SQLite database
    - Frappe traffic goes to FakeFrappe through httpx.MockTransport
"""

import json
import os

import httpx
import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from signo_connect.db.base import Base
from signo_connect.infrastructure.frappe_client import FrappeClient
import signo_connect.models  # noqa: F401

os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("FRAPPE_BASE_URL", "https://frappe.test")
os.environ.setdefault("FRAPPE_API_TOKEN", "test-key:test-secret")
os.environ.setdefault("FRAPPE_X_KEY", "test-x-key")


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


class FakeFrappe:
    """Scripted signodrive.com: responses keyed by URL path suffix.

    A value may be a dict/list (sent as 200 JSON), an httpx.Response, or a
    list of httpx.Response consumed one per request (the last one repeats).
    """

    def __init__(self):
        self.responses: dict[str, object] = {}
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        for suffix, scripted in self.responses.items():
            if not request.url.path.endswith(suffix):
                continue
            if _is_response_sequence(scripted):
                return scripted.pop(0) if len(scripted) > 1 else scripted[0]
            if isinstance(scripted, httpx.Response):
                return scripted
            return httpx.Response(200, json=scripted)
        return httpx.Response(404, json={"message": f"No route {request.url.path}"})

    def last_json(self) -> dict:
        return json.loads(self.requests[-1].content)


def _is_response_sequence(value: object) -> bool:
    return (
        isinstance(value, list) and bool(value)
        and all(isinstance(v, httpx.Response) for v in value)
    )


@pytest.fixture
def fake_frappe():
    return FakeFrappe()


@pytest.fixture
async def frappe(fake_frappe):
    client = FrappeClient(
        base_url="https://frappe.test",
        api_token="test-key:test-secret",
        x_key="test-x-key",
        max_retries=2,
        base_delay_ms=0,
        transport=httpx.MockTransport(fake_frappe.handler),
    )
    yield client
    await client.aclose()
