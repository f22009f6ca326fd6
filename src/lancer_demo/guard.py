"""Pre-flight checks for live seed and rollback runs.

Dry runs never go through the guard: they need no production credentials
and perform no database I/O.
"""

import logging

from lancer_config.settings import PRODUCTION_ENV, Settings
from lancer_demo.exceptions import (
    AuthorizationError,
    ConfigurationError,
    WrongEnvironmentError,
)

logger = logging.getLogger(__name__)

ALLOW_FLAG_VAR = "ALLOW_PROD_SEED"
CONFIRM_SEED_VAR = "CONFIRM_SEED_TAG"
CONFIRM_ROLLBACK_VAR = "CONFIRM_ROLLBACK"


class SeedGuard:
    """Validates the configured environment before any data is touched.

    Reads only the ``Settings`` snapshot it was built with, never the live
    process environment.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def authorize_seed(self, tag: str) -> None:
        """Allow a live seed of ``tag``.

        The confirmation variable must repeat the batch tag itself, so a
        stale command line cannot seed a different batch by accident.

        Raises
        ------
        WrongEnvironmentError
            If APP_ENV is not ``production``
        AuthorizationError
            If the allow flag or the tag confirmation is wrong
        ConfigurationError
            If DATABASE_URL is missing
        """
        self._check_environment()
        self._check_allow_flag()

        confirmed = self._settings.confirm_seed_tag
        if confirmed != tag:
            msg = (
                f"Invalid seed tag confirmation. Expected: {CONFIRM_SEED_VAR}={tag}, "
                f"got: {CONFIRM_SEED_VAR}={confirmed or ''}"
            )
            raise AuthorizationError(msg)

        self._check_database_url()
        logger.info("[LIVE] Seed of '%s' authorized", tag)

    def authorize_rollback(self) -> None:
        """Allow a live rollback.

        Raises
        ------
        WrongEnvironmentError
            If APP_ENV is not ``production``
        AuthorizationError
            If the allow flag or CONFIRM_ROLLBACK is not ``"true"``
        ConfigurationError
            If DATABASE_URL is missing
        """
        self._check_environment()
        self._check_allow_flag()

        if self._settings.confirm_rollback != "true":
            msg = (
                f"Missing rollback confirmation: {CONFIRM_ROLLBACK_VAR}=true. "
                "This is a safety measure to prevent accidental rollback"
            )
            raise AuthorizationError(msg)

        self._check_database_url()
        logger.info("[LIVE] Rollback authorized")

    def _check_environment(self) -> None:
        if self._settings.app_env != PRODUCTION_ENV:
            raise WrongEnvironmentError(PRODUCTION_ENV, self._settings.app_env)

    def _check_allow_flag(self) -> None:
        if self._settings.allow_prod_seed != "true":
            msg = (
                f"Missing required environment variable: {ALLOW_FLAG_VAR}=true. "
                "This is a safety measure to prevent accidental execution"
            )
            raise AuthorizationError(msg)

    def _check_database_url(self) -> None:
        if self._settings.database_url is None:
            msg = "DATABASE_URL not found"
            raise ConfigurationError(msg)
