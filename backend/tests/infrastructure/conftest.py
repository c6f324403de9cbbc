"""Infrastructure fixtures — one Storage fixture parametrized over both backends."""

import pytest

from signo_connect.infrastructure.database_storage import DatabaseStorage
from signo_connect.infrastructure.memory_storage import MemoryStorage


@pytest.fixture(params=["memory", "database"])
async def storage(request, test_session_factory):
    if request.param == "memory":
        yield MemoryStorage()
        return
    async with test_session_factory() as session:
        yield DatabaseStorage(session)
