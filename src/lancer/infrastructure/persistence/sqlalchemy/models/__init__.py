# ruff: noqa: E501 - Long import paths in __init__.py re-exports
"""SQLAlchemy models for the marketplace schema."""

from lancer.infrastructure.persistence.sqlalchemy.models.application_model import (
    ApplicationModel,
)
from lancer.infrastructure.persistence.sqlalchemy.models.base import Base
from lancer.infrastructure.persistence.sqlalchemy.models.freelancer_profile_model import (
    FreelancerProfileModel,
)
from lancer.infrastructure.persistence.sqlalchemy.models.job_model import JobModel
from lancer.infrastructure.persistence.sqlalchemy.models.message_model import (
    MessageModel,
)
from lancer.infrastructure.persistence.sqlalchemy.models.review_model import (
    ReviewModel,
)
from lancer.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

# Parents before children; reverse it to delete.
TABLE_MODELS: dict[str, type[Base]] = {
    "users": UserModel,
    "freelancer_profiles": FreelancerProfileModel,
    "jobs": JobModel,
    "applications": ApplicationModel,
    "reviews": ReviewModel,
    "messages": MessageModel,
}

__all__ = [
    "TABLE_MODELS",
    "ApplicationModel",
    "Base",
    "FreelancerProfileModel",
    "JobModel",
    "MessageModel",
    "ReviewModel",
    "UserModel",
]
