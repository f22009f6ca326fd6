"""
Pytest configuration for seed tooling integration tests.

Integration tests use Testcontainers for an ephemeral PostgreSQL instance.
"""

# Re-export shared database fixtures
from tests.shared.fixtures.database import (
    database,
    database_url,
    postgres_container,
)

__all__ = [
    "database",
    "database_url",
    "postgres_container",
]
