"""Deletes the rows recorded in a seed ledger, children before parents."""

import logging

from lancer_demo.data import ROLLBACK_TABLE_ORDER
from lancer_demo.exceptions import RollbackIncompleteError
from lancer_demo.ledger import LedgerEntry
from lancer_demo.repositories import SeedUnitOfWork

logger = logging.getLogger(__name__)


class SeedReverser:
    """Removes exactly the ids of one ledger entry.

    Each table is deleted in its own transaction. A failure stops the walk
    and leaves the already-cleared tables cleared, so a retry resumes where
    this run stopped.
    """

    def __init__(self, unit_of_work: SeedUnitOfWork | None = None) -> None:
        self._unit_of_work = unit_of_work

    async def rollback(self, entry: LedgerEntry, dry_run: bool) -> dict[str, int]:
        """Delete ``entry``'s recorded rows in reverse dependency order.

        Returns
        -------
        Rows deleted per table (under dry-run, rows that would be deleted)

        Raises
        ------
        RollbackIncompleteError
            If any table's delete fails; earlier tables stay deleted
        """
        mode = "DRY RUN" if dry_run else "LIVE"
        if not dry_run and self._unit_of_work is None:
            msg = "A live rollback needs a unit of work"
            raise RuntimeError(msg)

        deleted: dict[str, int] = {}
        completed: list[str] = []

        for table in ROLLBACK_TABLE_ORDER:
            ids = entry.ids_for(table)
            if not ids:
                logger.info("[%s] %s: no records to roll back", mode, table)
                deleted[table] = 0
                continue

            if dry_run:
                logger.info("[DRY RUN] %s: would delete %d records", table, len(ids))
                deleted[table] = len(ids)
                continue

            logger.info("[LIVE] %s: rolling back %d records...", table, len(ids))
            try:
                async with self._unit_of_work.transaction() as repository:
                    removed = await repository.delete_by_ids(table, ids)
            except Exception as e:
                logger.error("[LIVE] %s: delete failed", table)
                raise RollbackIncompleteError(entry.tag, table, completed) from e

            if removed < len(ids):
                logger.warning(
                    "[LIVE] %s: deleted %d of %d recorded records; "
                    "the rest no longer existed",
                    table,
                    removed,
                    len(ids),
                )
            else:
                logger.info("[LIVE] %s: deleted %d records", table, removed)

            deleted[table] = removed
            completed.append(table)

        return deleted
