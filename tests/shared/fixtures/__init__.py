"""Shared test fixtures and fakes."""

from tests.shared.fixtures.factories import make_settings
from tests.shared.fixtures.stores import InMemorySeedStore

__all__ = [
    "InMemorySeedStore",
    "make_settings",
]
