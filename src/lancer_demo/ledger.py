"""Durable record of what one seed run wrote.

The ledger is the only source of truth for a rollback: it deletes exactly the
ids recorded here, never rows inferred from the tag naming convention.

Artifacts live in one directory:

    seeds-<tag>.json                 active, eligible for rollback
    seeds-<tag>_rolled_back.json     archived after a successful rollback
"""

import re
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from lancer_config import ARCHIVE_MARKER, validate_seed_tag
from lancer_demo.exceptions import (
    AmbiguousLedgerError,
    ConfigurationError,
    LedgerIOError,
    LedgerNotFoundError,
)

LEDGER_PREFIX = "seeds-"
LEDGER_SUFFIX = ".json"

# `_rolled_back` or `_rolled_back-20250115T103000Z` at the end of the stem.
_ARCHIVED_STEM_RE = re.compile(rf"{re.escape(ARCHIVE_MARKER)}(-\d{{8}}T\d{{6}}Z)?$")


class LedgerEntry(BaseModel):
    """Ids and counts written by one seed run, keyed by table name."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    tag: str
    timestamp: datetime
    seed_ids: dict[str, list[str]] = Field(alias="seedIds")
    counts: dict[str, int]

    @classmethod
    def create(
        cls,
        tag: str,
        seed_ids: dict[str, list[str]],
        timestamp: datetime | None = None,
    ) -> "LedgerEntry":
        return cls(
            tag=tag,
            timestamp=timestamp or datetime.now(tz=timezone.utc),
            seed_ids={table: list(ids) for table, ids in seed_ids.items()},
            counts={table: len(ids) for table, ids in seed_ids.items()},
        )

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def ids_for(self, table: str) -> list[str]:
        return list(self.seed_ids.get(table, []))

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, indent=2)


def is_archived(path: Path) -> bool:
    return _ARCHIVED_STEM_RE.search(path.stem) is not None


class SeedLedger:
    """Reads, writes and archives ledger artifacts in ``directory``."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)

    def path_for(self, tag: str) -> Path:
        """Artifact path of ``tag``.

        Raises
        ------
        ConfigurationError
            If ``tag`` cannot name a ledger file
        """
        try:
            validate_seed_tag(tag)
        except ValueError as e:
            raise ConfigurationError(str(e)) from None
        return self.directory / f"{LEDGER_PREFIX}{tag}{LEDGER_SUFFIX}"

    def find_active(self) -> list[Path]:
        """Ledgers that were never rolled back, sorted by name."""
        return [path for path in self._scan() if not is_archived(path)]

    def find_archived(self) -> list[Path]:
        return [path for path in self._scan() if is_archived(path)]

    def save(self, entry: LedgerEntry) -> Path:
        """Write ``entry`` to its artifact; an existing artifact is never overwritten.

        Raises
        ------
        LedgerIOError
            If the artifact exists already or cannot be written. Without it a
            rollback is impossible, so this is fatal.
        """
        path = self.path_for(entry.tag)
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with path.open("x", encoding="utf-8") as fh:
                fh.write(entry.to_json())
        except OSError as e:
            raise LedgerIOError(path, "write") from e
        return path

    def load(self, path: Path) -> LedgerEntry:
        """Read one artifact.

        Raises
        ------
        LedgerIOError
            If the file cannot be read, does not hold a ledger entry, or holds
            the entry of a different tag than its name says
        """
        try:
            entry = LedgerEntry.model_validate_json(path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            raise LedgerIOError(path, "read") from e

        expected = self.tag_of(path)
        if entry.tag != expected:
            msg = f"ledger holds tag {entry.tag!r} but is named for {expected!r}"
            raise LedgerIOError(path, "read") from ValueError(msg)
        return entry

    def find_for_rollback(self, tag: str | None = None) -> Path:
        """Locate the single active artifact a rollback should consume.

        Parameters
        ----------
        tag
            Explicit batch tag. Without it, exactly one active artifact must
            exist.

        Raises
        ------
        ConfigurationError
            If ``tag`` cannot name a ledger file
        LedgerNotFoundError
            If no matching active artifact exists
        AmbiguousLedgerError
            If no tag was given and several active artifacts exist
        """
        if tag:
            path = self.path_for(tag)
            if not path.is_file():
                msg = f"Seed ledger not found: {path}"
                raise LedgerNotFoundError(msg)
            return path

        candidates = self.find_active()
        if not candidates:
            msg = (
                f"No seed ledger found in {self.directory}. "
                "Run seeding first or specify ROLLBACK_SEED_TAG"
            )
            raise LedgerNotFoundError(msg)
        if len(candidates) > 1:
            raise AmbiguousLedgerError([self.tag_of(path) for path in candidates])
        return candidates[0]

    def archive(self, path: Path) -> Path:
        """Mark ``path`` as consumed by renaming it; returns the new path.

        A previous archive of the same tag is kept as audit trail: the new
        archive then gets a timestamp suffix instead of replacing it.
        """
        target = path.with_name(f"{path.stem}{ARCHIVE_MARKER}{LEDGER_SUFFIX}")
        if target.exists():
            stamp = datetime.now(tz=timezone.utc).strftime("%Y%m%dT%H%M%SZ")
            target = path.with_name(
                f"{path.stem}{ARCHIVE_MARKER}-{stamp}{LEDGER_SUFFIX}"
            )

        try:
            path.rename(target)
        except OSError as e:
            raise LedgerIOError(path, "archive") from e
        return target

    @staticmethod
    def tag_of(path: Path) -> str:
        """Batch tag encoded in an artifact name."""
        stem = path.stem.removeprefix(LEDGER_PREFIX)
        return _ARCHIVED_STEM_RE.sub("", stem)

    def _scan(self) -> list[Path]:
        if not self.directory.is_dir():
            return []
        return sorted(
            path
            for path in self.directory.glob(f"{LEDGER_PREFIX}*{LEDGER_SUFFIX}")
            if path.is_file()
        )
