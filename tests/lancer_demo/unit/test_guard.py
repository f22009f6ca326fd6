"""Unit tests for SeedGuard."""

import pytest

from lancer_demo.exceptions import (
    AuthorizationError,
    ConfigurationError,
    WrongEnvironmentError,
)
from lancer_demo.guard import SeedGuard
from tests.shared.fixtures import make_settings


class TestAuthorizeSeed:
    """Tests for the live-seed pre-flight checks."""

    def test_fully_configured_production_passes(self, tmp_path):
        guard = SeedGuard(make_settings(tmp_path))

        guard.authorize_seed("demo-2025")

    def test_non_production_environment_raises(self, tmp_path):
        guard = SeedGuard(make_settings(tmp_path, app_env="development"))

        with pytest.raises(WrongEnvironmentError, match="development"):
            guard.authorize_seed("demo-2025")

    @pytest.mark.parametrize("flag", [None, "", "1", "yes", "True", "TRUE"])
    def test_allow_flag_must_be_exactly_true(self, tmp_path, flag):
        guard = SeedGuard(make_settings(tmp_path, allow_prod_seed=flag))

        with pytest.raises(AuthorizationError, match="ALLOW_PROD_SEED=true"):
            guard.authorize_seed("demo-2025")

    def test_confirmation_true_is_not_enough(self, tmp_path):
        """The confirmation must repeat the tag, not merely say yes."""
        guard = SeedGuard(make_settings(tmp_path, confirm_seed_tag="true"))

        with pytest.raises(AuthorizationError, match="CONFIRM_SEED_TAG=demo-2025"):
            guard.authorize_seed("demo-2025")

    def test_confirmation_of_another_tag_raises(self, tmp_path):
        guard = SeedGuard(make_settings(tmp_path, confirm_seed_tag="demo-2024"))

        with pytest.raises(AuthorizationError, match="got: CONFIRM_SEED_TAG=demo-2024"):
            guard.authorize_seed("demo-2025")

    def test_missing_database_url_raises(self, tmp_path):
        guard = SeedGuard(make_settings(tmp_path, database_url=None))

        with pytest.raises(ConfigurationError, match="DATABASE_URL"):
            guard.authorize_seed("demo-2025")

    def test_blank_database_url_counts_as_missing(self, tmp_path):
        guard = SeedGuard(make_settings(tmp_path, database_url="  "))

        with pytest.raises(ConfigurationError):
            guard.authorize_seed("demo-2025")

    def test_environment_is_checked_first(self, tmp_path):
        settings = make_settings(
            tmp_path,
            app_env="staging",
            allow_prod_seed=None,
            database_url=None,
        )

        with pytest.raises(WrongEnvironmentError):
            SeedGuard(settings).authorize_seed("demo-2025")


class TestAuthorizeRollback:
    """Tests for the live-rollback pre-flight checks."""

    def test_fully_configured_production_passes(self, tmp_path):
        SeedGuard(make_settings(tmp_path)).authorize_rollback()

    def test_rollback_does_not_need_the_seed_tag(self, tmp_path):
        settings = make_settings(tmp_path, confirm_seed_tag=None)

        SeedGuard(settings).authorize_rollback()

    def test_non_production_environment_raises(self, tmp_path):
        guard = SeedGuard(make_settings(tmp_path, app_env="test"))

        with pytest.raises(WrongEnvironmentError):
            guard.authorize_rollback()

    def test_missing_allow_flag_raises(self, tmp_path):
        guard = SeedGuard(make_settings(tmp_path, allow_prod_seed=None))

        with pytest.raises(AuthorizationError, match="ALLOW_PROD_SEED"):
            guard.authorize_rollback()

    @pytest.mark.parametrize("confirmation", [None, "", "yes", "demo-2025"])
    def test_confirmation_must_be_true(self, tmp_path, confirmation):
        guard = SeedGuard(make_settings(tmp_path, confirm_rollback=confirmation))

        with pytest.raises(AuthorizationError, match="CONFIRM_ROLLBACK=true"):
            guard.authorize_rollback()

    def test_missing_database_url_raises(self, tmp_path):
        guard = SeedGuard(make_settings(tmp_path, database_url=None))

        with pytest.raises(ConfigurationError):
            guard.authorize_rollback()
