"""SQLAlchemy persistence for the marketplace schema."""

from lancer.infrastructure.persistence.sqlalchemy.database import Database
from lancer.infrastructure.persistence.sqlalchemy.models import TABLE_MODELS, Base

__all__ = [
    "TABLE_MODELS",
    "Base",
    "Database",
]
