"""Store interfaces used by the seed writer and the rollback reverser."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from contextlib import AbstractAsyncContextManager
from typing import Any


class SeedRecordRepository(ABC):
    """Table-scoped batch insert and delete-by-id operations."""

    @abstractmethod
    async def insert_many(
        self,
        table: str,
        records: Sequence[dict[str, Any]],
    ) -> list[str]:
        """Insert ``records`` and return their assigned ids in record order."""

    @abstractmethod
    async def delete_by_ids(self, table: str, ids: Sequence[str]) -> int:
        """Delete rows whose id is in ``ids``; return how many were removed."""


class SeedUnitOfWork(ABC):
    """Hands out repositories bound to one atomic transaction."""

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[SeedRecordRepository]:
        """Open a transaction; commit on clean exit, roll back on error."""
