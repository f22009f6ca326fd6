"""Unit tests for the Typer CLI (no database involved)."""

import pytest
from rich.console import Console
from typer.testing import CliRunner

from lancer_demo import cli
from lancer_demo.ledger import LedgerEntry, SeedLedger

runner = CliRunner()

SETTINGS_ENV = (
    "APP_ENV",
    "DATABASE_URL",
    "ALLOW_PROD_SEED",
    "CONFIRM_SEED_TAG",
    "CONFIRM_ROLLBACK",
    "ROLLBACK_SEED_TAG",
    "SEED_TAG",
)


@pytest.fixture(autouse=True)
def cli_env(monkeypatch, tmp_path):
    """Point the CLI at a temporary ledger directory with no credentials."""
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("SEED_LEDGER_DIR", str(tmp_path))
    monkeypatch.setenv("SEED_TAG", "demo-2025")
    monkeypatch.setenv("PASSWORD_HASH_COST", "16")
    monkeypatch.setattr(cli, "console", Console(width=200))


class TestSeedCommand:
    """Tests for ``lancer-demo seed``."""

    def test_dry_run_succeeds_without_database(self, tmp_path):
        result = runner.invoke(cli.app, ["seed", "--dry-run"])

        assert result.exit_code == 0
        assert "DRY RUN complete - nothing was written" in result.output
        assert "65" in result.output
        assert list(tmp_path.iterdir()) == []

    def test_live_run_outside_production_fails(self):
        result = runner.invoke(cli.app, ["seed"])

        assert result.exit_code == 1
        assert "Seed failed" in result.output
        assert "production" in result.output

    def test_live_run_without_confirmation_fails(self, monkeypatch):
        monkeypatch.setenv("APP_ENV", "production")
        monkeypatch.setenv("ALLOW_PROD_SEED", "true")

        result = runner.invoke(cli.app, ["seed"])

        assert result.exit_code == 1
        assert "CONFIRM_SEED_TAG=demo-2025" in result.output

    def test_invalid_configuration(self, monkeypatch):
        monkeypatch.setenv("PASSWORD_HASH_COST", "1000")

        result = runner.invoke(cli.app, ["seed", "--dry-run"])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output


class TestRollbackCommand:
    """Tests for ``lancer-demo rollback``."""

    def test_dry_run_reports_ledger_counts(self, tmp_path):
        SeedLedger(tmp_path).save(
            LedgerEntry.create("demo-2025", {"users": ["u1", "u2"], "jobs": ["j1"]})
        )

        result = runner.invoke(cli.app, ["rollback", "--dry-run"])

        assert result.exit_code == 0
        assert "DRY RUN complete - nothing was deleted" in result.output
        assert (tmp_path / "seeds-demo-2025.json").is_file()

    def test_missing_ledger_fails(self):
        result = runner.invoke(cli.app, ["rollback", "--dry-run"])

        assert result.exit_code == 1
        assert "Rollback failed" in result.output

    def test_ambiguous_ledgers_need_a_tag(self, tmp_path):
        ledger = SeedLedger(tmp_path)
        ledger.save(LedgerEntry.create("demo-2025", {"users": ["u1"]}))
        ledger.save(LedgerEntry.create("demo-2026", {"users": ["u2"]}))

        ambiguous = runner.invoke(cli.app, ["rollback", "-n"])
        tagged = runner.invoke(cli.app, ["rollback", "-n", "--tag", "demo-2026"])

        assert ambiguous.exit_code == 1
        assert "ROLLBACK_SEED_TAG" in ambiguous.output
        assert tagged.exit_code == 0
        assert "demo-2026" in tagged.output

    def test_live_run_without_confirmation_fails(self, monkeypatch, tmp_path):
        SeedLedger(tmp_path).save(LedgerEntry.create("demo-2025", {"users": ["u1"]}))
        monkeypatch.setenv("APP_ENV", "production")
        monkeypatch.setenv("ALLOW_PROD_SEED", "true")

        result = runner.invoke(cli.app, ["rollback"])

        assert result.exit_code == 1
        assert "CONFIRM_ROLLBACK=true" in result.output
        assert (tmp_path / "seeds-demo-2025.json").is_file()


class TestLedgersCommand:
    """Tests for ``lancer-demo ledgers``."""

    def test_lists_active_and_archived(self, tmp_path):
        ledger = SeedLedger(tmp_path)
        ledger.archive(ledger.save(LedgerEntry.create("demo-2024", {"users": ["a"]})))
        ledger.save(LedgerEntry.create("demo-2025", {"users": ["b", "c"]}))

        result = runner.invoke(cli.app, ["ledgers"])

        assert result.exit_code == 0
        assert "seeds-demo-2025.json" in result.output
        assert "seeds-demo-2024_rolled_back.json" in result.output
        assert "rolled back" in result.output

    def test_unreadable_ledger_is_flagged(self, tmp_path):
        (tmp_path / "seeds-broken.json").write_text("{")

        result = runner.invoke(cli.app, ["ledgers"])

        assert result.exit_code == 0
        assert "unreadable" in result.output


def test_rollback_rejects_an_invalid_tag():
    result = runner.invoke(cli.app, ["rollback", "-n", "--tag", "demo/2025"])

    assert result.exit_code == 1
    assert "Invalid seed tag" in result.output


def test_init_db_without_database_url_fails():
    result = runner.invoke(cli.app, ["init-db"])

    assert result.exit_code == 1
    assert "DATABASE_URL not found" in result.output
