"""Database Storage — SQLAlchemy-backed Storage over one AsyncSession.

Invariants:
    - One instance per request, bound to the request's session
    - Every write commits before returning (no cross-call transactions)
    - Returned dicts contain every column, keyed by column name
    - Unknown keys in insert/patch data are ignored

Design Decisions:
    - Tables resolved from the declarative registry by __tablename__: the shared
      TableStorage operations stay table-name based for both backends
    - refresh() after commit: server-side values (ids) are loaded before conversion
"""

import logging

from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from signo_connect.db.base import Base
from signo_connect.infrastructure.table_storage import TableStorage
import signo_connect.models  # noqa: F401

logger = logging.getLogger(__name__)


def _models_by_table() -> dict[str, type]:
    return {
        mapper.class_.__tablename__: mapper.class_
        for mapper in Base.registry.mappers
    }


def _to_dict(obj) -> dict:
    return {c.name: getattr(obj, c.name) for c in obj.__table__.columns}


class DatabaseStorage(TableStorage):
    """Storage implementation over a relational database."""

    def __init__(self, session: AsyncSession):
        self._session = session
        self._models = _models_by_table()

    def _model(self, table: str):
        return self._models[table]

    def _columns(self, table: str) -> set[str]:
        return {c.name for c in self._model(table).__table__.columns}

    def _where(self, model, equals: dict) -> list:
        return [getattr(model, key) == value for key, value in equals.items()]

    async def _insert(self, table: str, data: dict) -> dict:
        model = self._model(table)
        columns = self._columns(table)
        obj = model(**{
            k: v for k, v in data.items()
            if k in columns and k != "id" and v is not None
        })
        self._session.add(obj)
        await self._session.commit()
        await self._session.refresh(obj)
        return _to_dict(obj)

    async def _first(self, table: str, **equals: object) -> dict | None:
        model = self._model(table)
        result = await self._session.execute(
            select(model).where(*self._where(model, equals))
            .order_by(model.id).limit(1),
        )
        obj = result.scalar_one_or_none()
        return _to_dict(obj) if obj else None

    async def _all(
        self,
        table: str,
        *,
        descending: bool = False,
        contains: tuple[str, str] | None = None,
        **equals: object,
    ) -> list[dict]:
        model = self._model(table)
        query = select(model).where(*self._where(model, equals))
        if contains:
            column, needle = contains
            query = query.where(getattr(model, column).ilike(f"%{needle}%"))
        query = query.order_by(model.id.desc() if descending else model.id)
        result = await self._session.execute(query)
        return [_to_dict(obj) for obj in result.scalars().all()]

    async def _patch(self, table: str, row_id: int, data: dict) -> dict | None:
        obj = await self._session.get(self._model(table), row_id)
        if obj is None:
            return None
        columns = self._columns(table)
        for key, value in data.items():
            if key in columns and key != "id":
                setattr(obj, key, value)
        await self._session.commit()
        await self._session.refresh(obj)
        return _to_dict(obj)

    async def _remove(self, table: str, **equals: object) -> int:
        model = self._model(table)
        result = await self._session.execute(
            delete(model).where(*self._where(model, equals)),
        )
        await self._session.commit()
        return result.rowcount or 0
