"""SQLAlchemy implementations of the seed store interfaces."""

from lancer_demo.infrastructure.persistence.sqlalchemy.seed_record_repository import (
    SeedRecordRepositorySQLAlchemy,
    SeedUnitOfWorkSQLAlchemy,
)

__all__ = [
    "SeedRecordRepositorySQLAlchemy",
    "SeedUnitOfWorkSQLAlchemy",
]
