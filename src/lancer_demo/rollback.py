"""Rollback of a seeded demo batch.

Loads the seed ledger, deletes exactly the recorded ids in reverse dependency
order and archives the ledger so the batch can be seeded again.

Usage:
    rollback-seed [--dry-run]
    # or
    lancer-demo rollback [--dry-run] [--tag TAG]

Live runs require:
    APP_ENV=production
    ALLOW_PROD_SEED=true
    CONFIRM_ROLLBACK=true
    DATABASE_URL=postgresql://...
    ROLLBACK_SEED_TAG=<tag>   (only when several ledgers exist)
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from lancer.infrastructure.persistence.sqlalchemy import Database
from lancer_config.settings import Settings
from lancer_demo.exceptions import ConfigurationError
from lancer_demo.guard import SeedGuard
from lancer_demo.infrastructure.persistence.sqlalchemy import SeedUnitOfWorkSQLAlchemy
from lancer_demo.ledger import LedgerEntry, SeedLedger
from lancer_demo.repositories import SeedUnitOfWork
from lancer_demo.reverser import SeedReverser

logger = logging.getLogger(__name__)


@dataclass
class RollbackResult:
    """Outcome of one rollback run."""

    entry: LedgerEntry
    deleted: dict[str, int]
    dry_run: bool
    ledger_path: Path
    archived_path: Path | None = None

    @property
    def total_deleted(self) -> int:
        return sum(self.deleted.values())


async def rollback_seed_data(
    settings: Settings,
    *,
    dry_run: bool = False,
    tag: str | None = None,
    unit_of_work: SeedUnitOfWork | None = None,
) -> RollbackResult:
    """Roll back the batch recorded in one ledger.

    Parameters
    ----------
    settings
        Configuration snapshot (ledger directory)
    dry_run
        Report what would be deleted; no store calls, ledger left in place
    tag
        Batch to roll back; required when several active ledgers exist
    unit_of_work
        Transaction provider for live runs

    Raises
    ------
    LedgerNotFoundError, AmbiguousLedgerError
        If no unique ledger can be identified
    RollbackIncompleteError
        If a delete fails; the ledger is kept so the rollback can be retried
    """
    mode = "DRY RUN" if dry_run else "LIVE"
    ledger = SeedLedger(settings.seed_ledger_dir)

    logger.info("[%s] Starting rollback", mode)
    logger.info("[%s] Environment: %s", mode, settings.app_env)

    path = ledger.find_for_rollback(tag)
    entry = ledger.load(path)
    logger.info("[%s] Loading seed ledger: %s", mode, path)
    logger.info("[%s] Seed tag: %s", mode, entry.tag)
    logger.info("[%s] Created: %s", mode, entry.timestamp.isoformat())

    if not dry_run:
        if unit_of_work is None:
            msg = "A live rollback needs a database connection"
            raise ConfigurationError(msg)
        logger.warning(
            "[LIVE] This will DELETE data from the %s database!", settings.app_env
        )
        logger.warning("[LIVE] Records to delete:")
        for table, count in entry.counts.items():
            logger.warning("[LIVE]   - %s: %d records", table, count)

    deleted = await SeedReverser(unit_of_work).rollback(entry, dry_run=dry_run)

    if dry_run:
        logger.info("[DRY RUN] Rollback simulated, ledger left in place: %s", path)
        return RollbackResult(
            entry=entry, deleted=deleted, dry_run=True, ledger_path=path
        )

    archived_path = ledger.archive(path)
    logger.info("[LIVE] Seed ledger archived: %s", archived_path)
    logger.info("[LIVE] Rollback completed: %d records deleted", sum(deleted.values()))
    return RollbackResult(
        entry=entry,
        deleted=deleted,
        dry_run=False,
        ledger_path=path,
        archived_path=archived_path,
    )


async def run_rollback(
    settings: Settings,
    dry_run: bool = False,
    tag: str | None = None,
) -> RollbackResult:
    """Guard, connect, roll back, and always close the connection pool.

    ``tag`` overrides ``settings.rollback_seed_tag``.
    """
    tag = tag or settings.rollback_seed_tag
    if tag:
        # Rejects a tag that cannot name a ledger file before connecting.
        SeedLedger(settings.seed_ledger_dir).path_for(tag)

    if dry_run:
        return await rollback_seed_data(settings, dry_run=True, tag=tag)

    SeedGuard(settings).authorize_rollback()

    async with Database(
        settings.async_database_url, echo=settings.database_echo
    ) as database:
        return await rollback_seed_data(
            settings,
            dry_run=False,
            tag=tag,
            unit_of_work=SeedUnitOfWorkSQLAlchemy(database),
        )


def main() -> None:
    """Console entry point (``rollback-seed``)."""
    # Imported here: the CLI module imports this one.
    from lancer_demo.cli import rollback_cli

    rollback_cli()


if __name__ == "__main__":
    main()
