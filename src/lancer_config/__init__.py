"""Shared application configuration package."""

from .settings import (
    ARCHIVE_MARKER,
    PRODUCTION_ENV,
    Settings,
    clear_settings_cache,
    get_config_dir,
    get_settings,
    to_async_database_url,
    validate_seed_tag,
)

__all__ = [
    "ARCHIVE_MARKER",
    "PRODUCTION_ENV",
    "Settings",
    "clear_settings_cache",
    "get_config_dir",
    "get_settings",
    "to_async_database_url",
    "validate_seed_tag",
]
