"""SQLAlchemy model for job applications."""

from decimal import Decimal

from sqlalchemy import ForeignKey, Numeric, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from lancer.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    CreatedAtMixin,
    UUIDPrimaryKeyMixin,
)


class ApplicationModel(Base, UUIDPrimaryKeyMixin, CreatedAtMixin):
    """A freelancer's application to a job."""

    __tablename__ = "applications"

    job_id: Mapped[str] = mapped_column(ForeignKey("jobs.id"), nullable=False)
    freelancer_id: Mapped[str] = mapped_column(
        ForeignKey("users.id"), nullable=False
    )
    cover_letter: Mapped[str] = mapped_column(Text, nullable=False)
    proposed_rate: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    proposed_duration: Mapped[str | None] = mapped_column(Text)
    status: Mapped[str] = mapped_column(String(20), server_default=text("'pending'"))
    ai_match_score: Mapped[Decimal | None] = mapped_column(Numeric(5, 2))
