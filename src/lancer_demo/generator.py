"""Builds the in-memory records of one seed batch.

Records are plain dicts keyed by model attribute names. Child generators take
the identifiers their parents were persisted with, so foreign keys always
point at rows written earlier in the same batch:

    users -> {freelancer_profiles, jobs} -> {applications, reviews, messages}

Every text field carries the batch tag for human traceability. Rollback never
relies on it; only the ledger's recorded ids are deleted.
"""

import random
import secrets
from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from lancer_demo.data import (
    APPLICATION_COUNT,
    EMPLOYER_COUNT,
    EXPERIENCE_LEVELS,
    FREELANCER_COUNT,
    JOB_CATEGORIES,
    JOB_COUNT,
    JOB_SKILLS,
    MESSAGE_COUNT,
    MESSAGES_WITH_JOB,
    PASSWORD_LENGTH,
    PROFILE_SKILLS,
    REVIEW_COUNT,
)
from lancer_identity import PasswordHashingService, generate_password

Record = dict[str, Any]


def _require(ids: Sequence[str], name: str) -> None:
    if not ids:
        msg = f"Cannot generate dependent records without {name}"
        raise ValueError(msg)


def _money(amount: int) -> Decimal:
    return Decimal(amount).quantize(Decimal("0.01"))


class SeedDataGenerator:
    """Generates the six record sequences of a demo batch.

    Parameters
    ----------
    tag
        Batch tag embedded in every identifying text field
    hasher
        Service used to hash the generated passwords
    rng
        Random source for passwords. Defaults to ``secrets.SystemRandom``;
        a seeded ``random.Random`` makes the batch reproducible.
    embed_passwords
        Append each plaintext demo password to the account's bio so operators
        can log in. Only acceptable for throwaway demo accounts.
    """

    def __init__(
        self,
        tag: str,
        hasher: PasswordHashingService,
        rng: random.Random | None = None,
        embed_passwords: bool = True,
    ) -> None:
        self.tag = tag
        self._hasher = hasher
        self._rng = rng or secrets.SystemRandom()
        self._embed_passwords = embed_passwords

    def generate_users(self) -> list[Record]:
        """5 employers followed by 10 freelancers, passwords hashed."""
        users = [
            self._user("employer", i, location_index=i)
            for i in range(1, EMPLOYER_COUNT + 1)
        ]
        users += [
            self._user("freelancer", i, location_index=i + EMPLOYER_COUNT)
            for i in range(1, FREELANCER_COUNT + 1)
        ]
        return users

    def generate_freelancer_profiles(self, user_ids: Sequence[str]) -> list[Record]:
        """One profile per freelancer; freelancers follow the employers."""
        freelancer_ids = list(
            user_ids[EMPLOYER_COUNT : EMPLOYER_COUNT + FREELANCER_COUNT]
        )
        _require(freelancer_ids, "freelancer user ids")

        return [
            {
                "user_id": user_id,
                "title": f"{self.tag} - Professional Developer {index + 1}",
                "hourly_rate": _money(25 + index * 10),
                "skills": list(PROFILE_SKILLS[: 2 + index % 3]),
                "experience": f"3+ years of experience in {self.tag} development",
                "portfolio": [
                    {
                        "title": f"{self.tag} Project {index + 1}",
                        "url": f"https://demo-project-{index + 1}.example.com",
                        "description": (
                            f"Seed portfolio project {index + 1} for testing"
                        ),
                    }
                ],
                "availability": "available",
            }
            for index, user_id in enumerate(freelancer_ids)
        ]

    def generate_jobs(self, employer_ids: Sequence[str]) -> list[Record]:
        """Jobs spread round-robin over the employers."""
        _require(employer_ids, "employer ids")

        jobs = []
        for index in range(JOB_COUNT):
            on_site = index % 3 == 0
            jobs.append(
                {
                    "employer_id": employer_ids[index % len(employer_ids)],
                    "title": f"{self.tag} - Job Posting {index + 1}",
                    "description": (
                        f"{self.tag} - This is a seed job posting {index + 1} for "
                        "testing the platform. It includes all necessary details "
                        "for demonstration purposes."
                    ),
                    "budget": _money(500 + index * 200),
                    "budget_type": "fixed" if index % 2 == 0 else "hourly",
                    "skills": list(JOB_SKILLS[: 2 + index % 3]),
                    "category": JOB_CATEGORIES[index % len(JOB_CATEGORIES)],
                    "experience": EXPERIENCE_LEVELS[index % len(EXPERIENCE_LEVELS)],
                    "duration": f"{2 + index % 6} weeks",
                    "remote": not on_site,
                    "location": f"City {index + 1}, Country" if on_site else None,
                    "status": "open",
                }
            )
        return jobs

    def generate_applications(
        self,
        job_ids: Sequence[str],
        freelancer_ids: Sequence[str],
    ) -> list[Record]:
        _require(job_ids, "job ids")
        _require(freelancer_ids, "freelancer ids")

        return [
            {
                "job_id": job_ids[index % len(job_ids)],
                "freelancer_id": freelancer_ids[index % len(freelancer_ids)],
                "cover_letter": (
                    f"{self.tag} - Application {index + 1}: This is a seed cover "
                    "letter for testing purposes. The freelancer is interested in "
                    "this project and has relevant experience."
                ),
                "proposed_rate": _money(20 + index * 5),
                "proposed_duration": f"{1 + index % 8} weeks",
                "status": "pending",
            }
            for index in range(APPLICATION_COUNT)
        ]

    def generate_reviews(
        self,
        job_ids: Sequence[str],
        user_ids: Sequence[str],
    ) -> list[Record]:
        """Each user reviews the next one; ratings cycle 3-5."""
        _require(job_ids, "job ids")
        _require(user_ids, "user ids")

        return [
            {
                "job_id": job_ids[index % len(job_ids)],
                "reviewer_id": user_ids[index % len(user_ids)],
                "reviewee_id": user_ids[(index + 1) % len(user_ids)],
                "rating": 3 + index % 3,
                "comment": (
                    f"{self.tag} - Review {index + 1}: This is a seed review for "
                    "testing purposes. The work was completed satisfactorily."
                ),
            }
            for index in range(REVIEW_COUNT)
        ]

    def generate_messages(
        self,
        user_ids: Sequence[str],
        job_ids: Sequence[str],
    ) -> list[Record]:
        """Messages between neighbouring users; the first few mention a job."""
        _require(user_ids, "user ids")
        _require(job_ids, "job ids")

        return [
            {
                "sender_id": user_ids[index % len(user_ids)],
                "receiver_id": user_ids[(index + 1) % len(user_ids)],
                "job_id": job_ids[index % len(job_ids)]
                if index < MESSAGES_WITH_JOB
                else None,
                "content": (
                    f"{self.tag} - Message {index + 1}: This is a seed message for "
                    "testing the messaging system."
                ),
                "is_read": index % 3 == 0,
            }
            for index in range(MESSAGE_COUNT)
        ]

    def _user(self, user_type: str, number: int, location_index: int) -> Record:
        password = generate_password(self._rng, PASSWORD_LENGTH)
        bio = (
            f"[SEED ACCOUNT] {user_type.capitalize()} {number} - Test account for "
            f"platform demonstration ({self.tag})."
        )
        if self._embed_passwords:
            bio += f" Password: {password}"

        site = "company" if user_type == "employer" else "portfolio"
        return {
            "username": f"{self.tag}_{user_type}_{number}",
            "email": f"{self.tag}_{user_type}_{number}@example.com",
            "password": self._hasher.hash(password),
            "user_type": user_type,
            "first_name": user_type.capitalize(),
            "last_name": str(number),
            "bio": bio,
            "location": f"City {location_index}, Country",
            "website": f"https://{site}{number}.example.com",
        }
