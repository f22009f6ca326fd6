"""Lancer demo-data CLI using Typer.

Commands:
    lancer-demo seed [--dry-run]
    lancer-demo rollback [--dry-run] [--tag TAG]
    lancer-demo ledgers
    lancer-demo init-db
"""

import asyncio
import logging
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from lancer.infrastructure.persistence.sqlalchemy import Database
from lancer_config.settings import Settings, get_settings
from lancer_demo.data import SEED_TABLE_ORDER
from lancer_demo.exceptions import ConfigurationError, SeedToolError
from lancer_demo.ledger import SeedLedger
from lancer_demo.rollback import run_rollback
from lancer_demo.seed import run_seed

app = typer.Typer(
    name="lancer-demo",
    help="Lancer - seed and roll back tagged demo data",
    no_args_is_help=True,
)
console = Console()

DRY_RUN_OPTION = typer.Option(
    False,
    "--dry-run",
    "-n",
    help="Simulate without touching the database",
)


def _load_settings() -> Settings:
    try:
        settings = get_settings()
    except ValidationError as e:
        console.print(f"[bold red]✗ Invalid configuration:[/bold red] {e}")
        raise typer.Exit(code=1) from e

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    return settings


def _banner(title: str, dry_run: bool) -> None:
    console.print(f"\n[bold]{title}[/bold]")
    console.print("=" * 50)
    if dry_run:
        console.print("[cyan]DRY RUN mode - no data will be changed[/cyan]")
    else:
        console.print(
            "[bold yellow]LIVE mode - the database WILL be changed![/bold yellow]"
        )


def _fail(action: str, error: SeedToolError) -> typer.Exit:
    console.print(f"\n[bold red]✗ {action} failed:[/bold red] {error}")
    return typer.Exit(code=1)


def _counts_table(title: str, counts: dict[str, int]) -> Table:
    table = Table(title=title)
    table.add_column("Table")
    table.add_column("Records", justify="right")
    for name, count in counts.items():
        table.add_row(name, str(count))
    table.add_row("[bold]total[/bold]", f"[bold]{sum(counts.values())}[/bold]")
    return table


@app.command("seed")
def seed_command(dry_run: bool = DRY_RUN_OPTION) -> None:
    """Insert the tagged demo batch and write its ledger."""
    settings = _load_settings()
    _banner("Lancer Demo Seed", dry_run)
    console.print(f"Seed tag: [bold]{settings.seed_tag}[/bold]")
    console.print(f"Database: {settings.database_display}")

    try:
        result = asyncio.run(run_seed(settings, dry_run=dry_run))
    except SeedToolError as e:
        raise _fail("Seed", e) from e

    label = "DRY RUN summary" if dry_run else "Seed summary"
    console.print(_counts_table(label, result.entry.counts))
    if dry_run:
        console.print("[cyan]DRY RUN complete - nothing was written[/cyan]")
        return

    console.print(f"[green]✓ Seed completed.[/green] Ledger: {result.ledger_path}")
    console.print("[dim]To roll back, run: rollback-seed[/dim]")


@app.command("rollback")
def rollback_command(
    dry_run: bool = DRY_RUN_OPTION,
    tag: Optional[str] = typer.Option(
        None,
        "--tag",
        "-t",
        help="Seed tag to roll back (overrides ROLLBACK_SEED_TAG)",
    ),
) -> None:
    """Delete the rows recorded in a seed ledger and archive it."""
    settings = _load_settings()
    _banner("Lancer Demo Rollback", dry_run)
    console.print(f"Database: {settings.database_display}")

    try:
        result = asyncio.run(run_rollback(settings, dry_run=dry_run, tag=tag))
    except SeedToolError as e:
        raise _fail("Rollback", e) from e

    label = "DRY RUN: would delete" if dry_run else "Deleted"
    console.print(_counts_table(f"{label} ({result.entry.tag})", result.deleted))
    if dry_run:
        console.print("[cyan]DRY RUN complete - nothing was deleted[/cyan]")
        return

    console.print(
        "[green]✓ Rollback completed.[/green] "
        f"Ledger archived: {result.archived_path}"
    )


@app.command("ledgers")
def ledgers_command() -> None:
    """List active and archived seed ledgers."""
    settings = _load_settings()
    ledger = SeedLedger(settings.seed_ledger_dir)

    table = Table(title=f"Seed ledgers in {ledger.directory.resolve()}")
    table.add_column("File")
    table.add_column("State")
    table.add_column("Tag")
    table.add_column("Created")
    table.add_column("Records", justify="right")

    for state, paths in (
        ("active", ledger.find_active()),
        ("rolled back", ledger.find_archived()),
    ):
        for path in paths:
            try:
                entry = ledger.load(path)
            except SeedToolError:
                table.add_row(path.name, state, "[red]unreadable[/red]", "", "")
                continue
            table.add_row(
                path.name,
                state,
                entry.tag,
                entry.timestamp.isoformat(timespec="seconds"),
                str(entry.total),
            )

    console.print(table)


@app.command("init-db")
def init_db_command() -> None:
    """Create the marketplace tables if they are missing."""
    settings = _load_settings()
    if settings.database_url is None:
        raise _fail("Database init", ConfigurationError("DATABASE_URL not found"))

    console.print(f"Database: {settings.database_display}")

    async def _create() -> None:
        async with Database(settings.async_database_url) as database:
            await database.create_tables()

    asyncio.run(_create())
    console.print(
        f"[green]✓ Tables ready:[/green] {', '.join(SEED_TABLE_ORDER)}"
    )


def seed_cli() -> None:
    """Run the seed command on its own (``seed-demo``)."""
    typer.run(seed_command)


def rollback_cli() -> None:
    """Run the rollback command on its own (``rollback-seed``)."""
    typer.run(rollback_command)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
