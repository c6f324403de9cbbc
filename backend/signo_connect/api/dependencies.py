"""API Dependencies — storage, Frappe client and admin key resolution for route handlers.

Invariants:
    - get_storage yields the in-memory singleton or a DatabaseStorage bound to one
      session per request, chosen by settings.storage_backend
    - get_frappe is never None inside a request (lifespan initialises the client)
    - require_admin_key is a no-op when admin_api_key is not configured

Design Decisions:
    - db_manager / frappe_client read through their modules at call time: both are
      assigned during lifespan startup, after this module is imported
"""

from typing import AsyncGenerator

from fastapi import Depends, Header

from signo_connect.config import Settings, get_settings
from signo_connect.core.errors import AuthenticationError, DatabaseError
from signo_connect.core.repository_protocols import Storage
from signo_connect.infrastructure import database, frappe_client
from signo_connect.infrastructure.database_storage import DatabaseStorage
from signo_connect.infrastructure.frappe_client import FrappeClient
from signo_connect.infrastructure.memory_storage import get_memory_storage


async def get_storage(
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[Storage, None]:
    """FastAPI dependency for the configured storage backend."""
    if settings.storage_backend == "memory":
        yield get_memory_storage()
        return
    if database.db_manager is None:
        raise DatabaseError("Database not initialized", "connect")
    async with database.db_manager.session() as session:
        yield DatabaseStorage(session)


def get_frappe() -> FrappeClient:
    """FastAPI dependency for the shared Frappe client."""
    if frappe_client.frappe_client is None:
        settings = get_settings()
        frappe_client.init_frappe_client(
            base_url=settings.frappe_base_url,
            api_token=settings.frappe_api_token,
            x_key=settings.frappe_x_key,
            timeout_seconds=settings.frappe_timeout_seconds,
            max_retries=settings.frappe_max_retries,
            base_delay_ms=settings.frappe_base_delay_ms,
        )
    return frappe_client.frappe_client


async def require_admin_key(
    x_api_key: str | None = Header(None),
    settings: Settings = Depends(get_settings),
) -> None:
    """Reject requests without the configured X-API-Key."""
    if settings.admin_api_key and x_api_key != settings.admin_api_key:
        raise AuthenticationError()
