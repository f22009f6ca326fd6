"""Demo data seeding for the Lancer marketplace.

Inserts one tagged batch of interrelated demo records (users, freelancer
profiles, jobs, applications, reviews, messages) in a single transaction and
records the written ids in a ledger file so the batch can be rolled back.

Usage:
    seed-demo [--dry-run]
    # or
    lancer-demo seed [--dry-run]
    # or
    python -m lancer_demo.seed

Live runs require:
    APP_ENV=production
    ALLOW_PROD_SEED=true
    CONFIRM_SEED_TAG=<the batch tag>
    DATABASE_URL=postgresql://...

Options:
    --dry-run   Show what would be created without writing to database
"""

import logging
import random
from dataclasses import dataclass
from pathlib import Path

from lancer.infrastructure.persistence.sqlalchemy import Database
from lancer_config.settings import Settings
from lancer_demo.data import EMPLOYER_COUNT, FREELANCER_COUNT
from lancer_demo.exceptions import (
    ConfigurationError,
    DuplicateSeedError,
    LedgerIOError,
)
from lancer_demo.generator import SeedDataGenerator
from lancer_demo.guard import SeedGuard
from lancer_demo.infrastructure.persistence.sqlalchemy import SeedUnitOfWorkSQLAlchemy
from lancer_demo.ledger import LedgerEntry, SeedLedger
from lancer_demo.repositories import SeedUnitOfWork
from lancer_demo.writer import SeedWriter
from lancer_identity import PasswordHashingService

logger = logging.getLogger(__name__)


@dataclass
class SeedResult:
    """What a seed run wrote (or, under dry-run, would write)."""

    entry: LedgerEntry
    dry_run: bool
    ledger_path: Path | None = None


def build_generator(
    settings: Settings,
    rng: random.Random | None = None,
) -> SeedDataGenerator:
    """Create the generator for ``settings.seed_tag``."""
    return SeedDataGenerator(
        tag=settings.seed_tag,
        hasher=PasswordHashingService(cost=settings.password_hash_cost),
        rng=rng,
        embed_passwords=settings.seed_embed_passwords,
    )


async def seed_tables(
    writer: SeedWriter,
    generator: SeedDataGenerator,
    dry_run: bool,
) -> dict[str, list[str]]:
    """Generate and persist every table, parents first.

    Each child generator receives the ids its parents were persisted with.
    """
    mode = "DRY RUN" if dry_run else "LIVE"
    seed_ids: dict[str, list[str]] = {}

    logger.info("[%s] Generating secure passwords for demo accounts...", mode)
    users = generator.generate_users()
    logger.info("[%s] Generated %d users with secure passwords", mode, len(users))

    user_ids = await writer.persist_table("users", users, dry_run)
    seed_ids["users"] = user_ids
    employer_ids = user_ids[:EMPLOYER_COUNT]
    freelancer_ids = user_ids[EMPLOYER_COUNT : EMPLOYER_COUNT + FREELANCER_COUNT]

    seed_ids["freelancer_profiles"] = await writer.persist_table(
        "freelancer_profiles",
        generator.generate_freelancer_profiles(user_ids),
        dry_run,
    )

    job_ids = await writer.persist_table(
        "jobs", generator.generate_jobs(employer_ids), dry_run
    )
    seed_ids["jobs"] = job_ids

    seed_ids["applications"] = await writer.persist_table(
        "applications",
        generator.generate_applications(job_ids, freelancer_ids),
        dry_run,
    )
    seed_ids["reviews"] = await writer.persist_table(
        "reviews", generator.generate_reviews(job_ids, user_ids), dry_run
    )
    seed_ids["messages"] = await writer.persist_table(
        "messages", generator.generate_messages(user_ids, job_ids), dry_run
    )

    return seed_ids


async def seed_demo_data(
    settings: Settings,
    *,
    dry_run: bool = False,
    unit_of_work: SeedUnitOfWork | None = None,
    generator: SeedDataGenerator | None = None,
) -> SeedResult:
    """Seed one demo batch.

    Parameters
    ----------
    settings
        Configuration snapshot (tag, ledger directory, hashing cost)
    dry_run
        Simulate every step without touching the database or the ledger
    unit_of_work
        Transaction provider for live runs
    generator
        Record generator; built from ``settings`` when omitted

    Returns
    -------
    The ledger entry of the batch; saved to disk for live runs only

    Raises
    ------
    DuplicateSeedError
        If a live run finds an active ledger (no rows are written)
    PersistenceError
        If any insert fails (the whole transaction is rolled back)
    LedgerIOError
        If the ledger cannot be written after the commit
    """
    tag = settings.seed_tag
    mode = "DRY RUN" if dry_run else "LIVE"
    ledger = SeedLedger(settings.seed_ledger_dir)
    # Fails before any write if the tag cannot name a ledger file.
    ledger.path_for(tag)

    logger.info("[%s] Starting seed", mode)
    logger.info("[%s] Seed tag: %s", mode, tag)
    logger.info("[%s] Environment: %s", mode, settings.app_env)

    active = ledger.find_active()
    if active and not dry_run:
        raise DuplicateSeedError(active[0])
    if active:
        logger.info("[DRY RUN] Note: existing seed ledger found: %s", active[0])
        logger.info("[DRY RUN] Continuing with dry run...")

    generator = generator or build_generator(settings)

    if dry_run:
        seed_ids = await seed_tables(SeedWriter(), generator, dry_run=True)
        entry = LedgerEntry.create(tag, seed_ids)
        logger.info(
            "[DRY RUN] Seed simulated: %d records, nothing written", entry.total
        )
        return SeedResult(entry=entry, dry_run=True)

    if unit_of_work is None:
        msg = "A live seed needs a database connection"
        raise ConfigurationError(msg)

    logger.warning(
        "[LIVE] This will INSERT data into the %s database!", settings.app_env
    )
    logger.warning("[LIVE] All records will be tagged with: %s", tag)
    logger.warning("[LIVE] Payment fields are left empty")

    logger.info("[LIVE] Starting atomic transaction...")
    async with unit_of_work.transaction() as repository:
        seed_ids = await seed_tables(SeedWriter(repository), generator, dry_run=False)
    logger.info("[LIVE] Transaction committed")

    # Written only after the commit, so it never lists rows that do not exist.
    entry = LedgerEntry.create(tag, seed_ids)
    try:
        ledger_path = ledger.save(entry)
    except LedgerIOError:
        logger.error(
            "[LIVE] Rows were committed but the ledger could not be saved. "
            "Keep this record to roll back by hand:\n%s",
            entry.to_json(),
        )
        raise

    logger.info("[LIVE] Seed ledger saved to: %s", ledger_path)
    logger.info("[LIVE] Seed completed: %d records", entry.total)
    return SeedResult(entry=entry, dry_run=False, ledger_path=ledger_path)


async def run_seed(settings: Settings, dry_run: bool = False) -> SeedResult:
    """Guard, connect, seed, and always close the connection pool."""
    if dry_run:
        return await seed_demo_data(settings, dry_run=True)

    SeedGuard(settings).authorize_seed(settings.seed_tag)

    async with Database(
        settings.async_database_url, echo=settings.database_echo
    ) as database:
        return await seed_demo_data(
            settings,
            dry_run=False,
            unit_of_work=SeedUnitOfWorkSQLAlchemy(database),
        )


def main() -> None:
    """Console entry point (``seed-demo``)."""
    # Imported here: the CLI module imports this one.
    from lancer_demo.cli import seed_cli

    seed_cli()


if __name__ == "__main__":
    main()
