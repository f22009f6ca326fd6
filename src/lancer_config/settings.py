"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. LANCER_ENV_FILE environment variable (path to .env file)
3. config/.env.dev - local development
4. config/.env - production/Docker

Uses pydantic-settings for automatic type coercion and validation.
Settings are read once per process and passed down explicitly; nothing
re-reads the environment mid-operation.
"""

from __future__ import annotations

import os
import re
from functools import lru_cache
from pathlib import Path

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

PRODUCTION_ENV = "production"

# Suffix that marks a rolled-back ledger file; never part of a batch tag.
ARCHIVE_MARKER = "_rolled_back"

_SEED_TAG_RE = re.compile(r"^[A-Za-z0-9][A-Za-z0-9._-]*$")


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / ".git").is_dir():
            return parent
        if parent == Path("/app"):
            return parent

    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. LANCER_ENV_FILE env var (full path)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("LANCER_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


def to_async_database_url(url: str) -> str:
    """Rewrite a plain PostgreSQL URL so SQLAlchemy uses the asyncpg driver."""
    for prefix in ("postgres://", "postgresql://", "postgresql+psycopg2://"):
        if url.startswith(prefix):
            return "postgresql+asyncpg://" + url[len(prefix) :]
    return url


def validate_seed_tag(tag: str) -> str:
    """Check that ``tag`` can name a ledger file.

    The tag becomes part of ``seeds-<tag>.json``, so it must be a single path
    component and must not contain the archive marker.

    Raises
    ------
    ValueError
        If the tag is empty, contains a path separator or other disallowed
        character, or contains the archive marker
    """
    if not _SEED_TAG_RE.fullmatch(tag):
        msg = (
            f"Invalid seed tag {tag!r}: use letters, digits, '.', '_' or '-', "
            "starting with a letter or digit"
        )
        raise ValueError(msg)
    if ARCHIVE_MARKER in tag:
        msg = f"Invalid seed tag {tag!r}: must not contain {ARCHIVE_MARKER!r}"
        raise ValueError(msg)
    return tag


class Settings(BaseSettings):
    """Application configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "Lancer"
    app_env: str = "development"

    # Database
    database_url: SecretStr | None = None
    database_echo: bool = False

    # Seed safety switches. Kept as plain strings: they must match an exact
    # value, so "1" or "yes" must not pass as "true".
    allow_prod_seed: str | None = None
    confirm_seed_tag: str | None = None
    confirm_rollback: str | None = None
    rollback_seed_tag: str | None = None

    # Seeding
    seed_tag: str = "prod-seed-2025"
    seed_ledger_dir: Path = Path(".")
    seed_embed_passwords: bool = True

    # Password hashing (scrypt N parameter)
    password_hash_cost: int = 16384

    # Logging
    log_level: str = "INFO"

    @field_validator("database_url", mode="before")
    @classmethod
    def _blank_database_url_is_missing(cls, v: object) -> object:
        """Treat DATABASE_URL= (empty) the same as an unset variable."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("seed_tag")
    @classmethod
    def _validate_seed_tag(cls, v: str) -> str:
        return validate_seed_tag(v)

    @field_validator("rollback_seed_tag", mode="before")
    @classmethod
    def _validate_rollback_seed_tag(cls, v: object) -> object:
        """Blank means unset; anything else must be a valid tag."""
        if isinstance(v, str):
            if not v.strip():
                return None
            return validate_seed_tag(v)
        return v

    @field_validator("password_hash_cost")
    @classmethod
    def _validate_hash_cost(cls, v: int) -> int:
        """scrypt requires N to be a power of two greater than one."""
        if v < 2 or v & (v - 1):
            msg = "password_hash_cost must be a power of two greater than 1"
            raise ValueError(msg)
        return v

    @property
    def is_production(self) -> bool:
        return self.app_env == PRODUCTION_ENV

    @property
    def async_database_url(self) -> str | None:
        """Database URL rewritten for the asyncpg driver, if configured."""
        if self.database_url is None:
            return None
        return to_async_database_url(self.database_url.get_secret_value())

    @property
    def database_display(self) -> str:
        """Database location without credentials, safe for logs."""
        if self.database_url is None:
            return "<not configured>"
        url = self.database_url.get_secret_value()
        return url.split("@")[-1] if "@" in url else url


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
