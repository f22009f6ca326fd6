"""Errors raised by the demo-data lifecycle tooling.

Every error is terminal for the invoking process; the CLI reports the
message and exits non-zero. Nothing here is retried.
"""

from collections.abc import Sequence
from pathlib import Path


class SeedToolError(Exception):
    """Base exception for all seed/rollback errors."""

    def __init__(self, message: str = "Seed tooling error"):
        self.message = message
        super().__init__(self.message)

    def __str__(self) -> str:
        # Surface the wrapped store or filesystem error, if any.
        if self.__cause__ is not None:
            return f"{self.message}: {self.__cause__}"
        return self.message


class WrongEnvironmentError(SeedToolError):
    """Raised when the execution context is not the production marker."""

    def __init__(self, expected: str, actual: str | None):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"This command is only for the {expected} environment "
            f"(current APP_ENV: {actual or '<unset>'})"
        )


class AuthorizationError(SeedToolError):
    """Raised when an allow flag or confirmation variable is missing or wrong."""


class ConfigurationError(SeedToolError):
    """Raised when required configuration (e.g. DATABASE_URL) is absent."""


class DuplicateSeedError(SeedToolError):
    """Raised when a live seed finds a ledger that was never rolled back."""

    def __init__(self, existing: Path):
        self.existing = existing
        super().__init__(
            f"Seeding already completed, existing seed ledger found: {existing}. "
            "Run the rollback first, or use --dry-run to test without "
            "affecting the database"
        )


class PersistenceError(SeedToolError):
    """Raised when the store rejects a write or delete."""

    def __init__(self, table: str, record_count: int, operation: str = "insert"):
        self.table = table
        self.record_count = record_count
        self.operation = operation
        super().__init__(f"Failed to {operation} {record_count} {table} records")


class LedgerIOError(SeedToolError):
    """Raised when a ledger artifact cannot be read or written."""

    def __init__(self, path: Path, action: str):
        self.path = path
        self.action = action
        super().__init__(f"Failed to {action} seed ledger {path}")


class LedgerNotFoundError(SeedToolError):
    """Raised when no ledger matches a rollback request."""


class AmbiguousLedgerError(SeedToolError):
    """Raised when several active ledgers exist and no tag was given."""

    def __init__(self, tags: Sequence[str]):
        self.tags = list(tags)
        listing = ", ".join(self.tags)
        super().__init__(
            f"Multiple seed ledgers found ({listing}). "
            "Specify the one to roll back, e.g. "
            f"ROLLBACK_SEED_TAG={self.tags[0]}"
        )


class RollbackIncompleteError(SeedToolError):
    """Raised when a delete fails part-way through a rollback."""

    def __init__(self, tag: str, table: str, completed: Sequence[str]):
        self.tag = tag
        self.table = table
        self.completed = list(completed)
        done = ", ".join(self.completed) or "none"
        super().__init__(
            f"Rollback of seed '{tag}' failed while deleting {table} "
            f"(tables already cleared: {done}). The database may be in an "
            "inconsistent state; manual inspection may be required. "
            "The seed ledger was kept, so the rollback can be retried"
        )
