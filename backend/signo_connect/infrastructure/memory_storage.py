"""Memory Storage — process-local Storage backend over dicts.

Invariants:
    - Row shape equals the ORM table: every column present, ORM defaults applied
    - Ids are per-table counters starting at 1, never reused after deletes
    - Callers always receive deep copies (mutating a result never changes storage)
    - Unknown keys in insert/patch data are ignored, same as column-mapped ORM writes

Design Decisions:
    - Column list and defaults read from Base.metadata: a new model column appears
      in both backends without touching this file
    - Module-level singleton via get_memory_storage(): single-process uvicorn,
      data lost on restart (acceptable for demos and tests)
"""

import copy
import logging

from sqlalchemy import Column, Table

from signo_connect.db.base import Base
from signo_connect.infrastructure.table_storage import TableStorage
import signo_connect.models  # noqa: F401

logger = logging.getLogger(__name__)


def _column_default(column: Column) -> object:
    """Evaluate the Python-side ORM default of a column (None when absent)."""
    default = column.default
    if default is None:
        return None
    if default.is_callable:
        return default.arg(None)
    if default.is_scalar:
        return copy.deepcopy(default.arg)
    return None


class _MemoryTable:
    """Rows of one table keyed by id."""

    def __init__(self, table: Table):
        self.columns = list(table.columns)
        self.names = {c.name for c in self.columns}
        self.rows: dict[int, dict] = {}
        self.next_id = 1

    def build(self, data: dict) -> dict:
        row = {}
        for column in self.columns:
            if column.name == "id":
                row["id"] = self.next_id
            elif column.name in data and data[column.name] is not None:
                row[column.name] = copy.deepcopy(data[column.name])
            else:
                row[column.name] = _column_default(column)
        self.next_id += 1
        return row


def _matches(row: dict, equals: dict) -> bool:
    return all(row.get(key) == value for key, value in equals.items())


class MemoryStorage(TableStorage):
    """In-memory Storage for development, demos and tests."""

    def __init__(self):
        self._tables = {
            name: _MemoryTable(table)
            for name, table in Base.metadata.tables.items()
        }

    async def _insert(self, table: str, data: dict) -> dict:
        tbl = self._tables[table]
        row = tbl.build(data)
        tbl.rows[row["id"]] = row
        return copy.deepcopy(row)

    async def _first(self, table: str, **equals: object) -> dict | None:
        for row in self._tables[table].rows.values():
            if _matches(row, equals):
                return copy.deepcopy(row)
        return None

    async def _all(
        self,
        table: str,
        *,
        descending: bool = False,
        contains: tuple[str, str] | None = None,
        **equals: object,
    ) -> list[dict]:
        rows = [r for r in self._tables[table].rows.values() if _matches(r, equals)]
        if contains:
            column, needle = contains
            rows = [
                r for r in rows
                if needle.lower() in (r.get(column) or "").lower()
            ]
        rows.sort(key=lambda r: r["id"], reverse=descending)
        return copy.deepcopy(rows)

    async def _patch(self, table: str, row_id: int, data: dict) -> dict | None:
        tbl = self._tables[table]
        row = tbl.rows.get(row_id)
        if row is None:
            return None
        for key, value in data.items():
            if key in tbl.names and key != "id":
                row[key] = copy.deepcopy(value)
        return copy.deepcopy(row)

    async def _remove(self, table: str, **equals: object) -> int:
        rows = self._tables[table].rows
        doomed = [rid for rid, row in rows.items() if _matches(row, equals)]
        for rid in doomed:
            del rows[rid]
        return len(doomed)


_memory_storage: MemoryStorage | None = None


def get_memory_storage() -> MemoryStorage:
    """Process-wide MemoryStorage, created on first use."""
    global _memory_storage
    if _memory_storage is None:
        _memory_storage = MemoryStorage()
        logger.info("In-memory storage initialized")
    return _memory_storage
