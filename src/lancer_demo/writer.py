"""Persists generated record sequences, one table at a time."""

import logging
from collections.abc import Sequence
from typing import Any

from lancer_demo.exceptions import PersistenceError
from lancer_demo.repositories import SeedRecordRepository

logger = logging.getLogger(__name__)


def dry_run_ids(table_name: str, count: int) -> list[str]:
    """Placeholder ids for a simulated insert, unique across tables."""
    return [f"dry-run-{table_name}-{index}" for index in range(count)]


class SeedWriter:
    """Writes record sequences through a repository, or simulates it.

    A writer without a repository can only be used for dry runs.
    """

    def __init__(self, repository: SeedRecordRepository | None = None) -> None:
        self._repository = repository

    async def persist_table(
        self,
        table_name: str,
        records: Sequence[dict[str, Any]],
        dry_run: bool,
    ) -> list[str]:
        """Insert ``records`` into ``table_name`` and return their ids.

        Under dry-run the ids are placeholders and nothing is written, so the
        rest of the pipeline (ledger shape, counts) runs unchanged.

        Raises
        ------
        PersistenceError
            If the store rejects the batch; the enclosing transaction aborts
        """
        if dry_run:
            logger.info(
                "[DRY RUN] %s: would insert %d records", table_name, len(records)
            )
            return dry_run_ids(table_name, len(records))

        if self._repository is None:
            msg = "A live insert needs a repository"
            raise RuntimeError(msg)

        logger.info("[LIVE] %s: inserting %d records...", table_name, len(records))
        try:
            ids = await self._repository.insert_many(table_name, records)
        except PersistenceError:
            logger.error("[LIVE] %s: insert failed", table_name)
            raise

        if len(ids) != len(records):
            msg = f"{table_name}: store returned {len(ids)} ids for {len(records)} rows"
            raise PersistenceError(table_name, len(records)) from RuntimeError(msg)

        logger.info("[LIVE] %s: inserted %d records", table_name, len(ids))
        return ids
