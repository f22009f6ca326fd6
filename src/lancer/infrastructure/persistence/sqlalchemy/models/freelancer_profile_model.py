"""SQLAlchemy model for freelancer profiles."""

from decimal import Decimal

from sqlalchemy import JSON, ForeignKey, Integer, Numeric, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from lancer.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    CreatedAtMixin,
    UUIDPrimaryKeyMixin,
)


class FreelancerProfileModel(Base, UUIDPrimaryKeyMixin, CreatedAtMixin):
    """Public profile of a freelancer user."""

    __tablename__ = "freelancer_profiles"

    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), nullable=False)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    hourly_rate: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    skills: Mapped[list] = mapped_column(JSON, default=list)
    experience: Mapped[str | None] = mapped_column(Text)
    portfolio: Mapped[list] = mapped_column(JSON, default=list)
    availability: Mapped[str] = mapped_column(
        String(20), server_default=text("'available'")
    )
    rating: Mapped[Decimal] = mapped_column(Numeric(3, 2), server_default=text("0"))
    completed_jobs: Mapped[int] = mapped_column(Integer, server_default=text("0"))
    total_earnings: Mapped[Decimal] = mapped_column(
        Numeric(10, 2), server_default=text("0")
    )
