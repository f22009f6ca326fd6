"""In-memory implementation of the seed store interfaces."""

from collections.abc import AsyncGenerator, Sequence
from contextlib import asynccontextmanager
from typing import Any
from uuid import uuid4

from lancer_demo.data import SEED_TABLE_ORDER
from lancer_demo.exceptions import PersistenceError
from lancer_demo.repositories import SeedRecordRepository, SeedUnitOfWork


class _InMemoryRepository(SeedRecordRepository):
    def __init__(self, store: "InMemorySeedStore") -> None:
        self._store = store

    async def insert_many(
        self,
        table: str,
        records: Sequence[dict[str, Any]],
    ) -> list[str]:
        self._store.insert_calls.append((table, len(records)))
        if table == self._store.fail_on_insert:
            raise PersistenceError(table, len(records)) from ValueError(
                "duplicate key value violates unique constraint"
            )

        ids = []
        for record in records:
            row_id = str(uuid4())
            self._store.tables[table][row_id] = dict(record)
            ids.append(row_id)
        return ids

    async def delete_by_ids(self, table: str, ids: Sequence[str]) -> int:
        self._store.delete_calls.append((table, list(ids)))
        if table == self._store.fail_on_delete:
            raise PersistenceError(table, len(ids), operation="delete") from (
                RuntimeError("connection reset")
            )

        rows = self._store.tables[table]
        removed = 0
        for row_id in ids:
            if rows.pop(row_id, None) is not None:
                removed += 1
        return removed


class InMemorySeedStore(SeedUnitOfWork):
    """Dict-backed tables with transaction rollback and call recording."""

    def __init__(self) -> None:
        self.tables: dict[str, dict[str, dict[str, Any]]] = {
            table: {} for table in SEED_TABLE_ORDER
        }
        self.insert_calls: list[tuple[str, int]] = []
        self.delete_calls: list[tuple[str, list[str]]] = []
        self.transactions = 0
        self.rollbacks = 0
        self.fail_on_insert: str | None = None
        self.fail_on_delete: str | None = None

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[SeedRecordRepository, None]:
        snapshot = {table: dict(rows) for table, rows in self.tables.items()}
        self.transactions += 1
        try:
            yield _InMemoryRepository(self)
        except BaseException:
            self.tables = snapshot
            self.rollbacks += 1
            raise

    def count(self, table: str) -> int:
        return len(self.tables[table])

    def total(self) -> int:
        return sum(len(rows) for rows in self.tables.values())
