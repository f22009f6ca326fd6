"""SQLAlchemy base configuration."""

from datetime import datetime

from sqlalchemy import DateTime, String, func, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all database models."""


class UUIDPrimaryKeyMixin:
    """String primary key generated by PostgreSQL (gen_random_uuid)."""

    id: Mapped[str] = mapped_column(
        String,
        primary_key=True,
        server_default=text("gen_random_uuid()"),
    )


class CreatedAtMixin:
    """Mixin for a server-side created_at timestamp."""

    created_at: Mapped[datetime | None] = mapped_column(
        DateTime,
        server_default=func.now(),
    )
