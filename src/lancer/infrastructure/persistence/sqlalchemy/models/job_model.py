"""SQLAlchemy model for job postings."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import (
    JSON,
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    func,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from lancer.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    CreatedAtMixin,
    UUIDPrimaryKeyMixin,
)


class JobModel(Base, UUIDPrimaryKeyMixin, CreatedAtMixin):
    """Job posted by an employer."""

    __tablename__ = "jobs"

    employer_id: Mapped[str] = mapped_column(ForeignKey("users.id"), nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    budget: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    budget_type: Mapped[str] = mapped_column(String(10), nullable=False)
    skills: Mapped[list] = mapped_column(JSON, default=list)
    category: Mapped[str] = mapped_column(Text, nullable=False)
    experience: Mapped[str] = mapped_column(String(20), nullable=False)
    duration: Mapped[str | None] = mapped_column(Text)
    remote: Mapped[bool] = mapped_column(Boolean, server_default=text("true"))
    location: Mapped[str | None] = mapped_column(Text)
    status: Mapped[str] = mapped_column(String(20), server_default=text("'open'"))
    featured: Mapped[bool] = mapped_column(Boolean, server_default=text("false"))
    urgent: Mapped[bool] = mapped_column(Boolean, server_default=text("false"))
    applications_count: Mapped[int] = mapped_column(
        Integer, server_default=text("0")
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime,
        server_default=func.now(),
        onupdate=func.now(),
    )
