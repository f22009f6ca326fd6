"""Demo data definitions for the marketplace seed batch.

All data is fictional and used for demonstration purposes only.
"""

DEFAULT_SEED_TAG = "prod-seed-2025"

EMPLOYER_COUNT = 5
FREELANCER_COUNT = 10
JOB_COUNT = 10
APPLICATION_COUNT = 10
REVIEW_COUNT = 10
MESSAGE_COUNT = 10

# Messages with an index below this are linked to a job.
MESSAGES_WITH_JOB = 5

PASSWORD_LENGTH = 16

# Parents before children; the rollback walks this backwards.
SEED_TABLE_ORDER: tuple[str, ...] = (
    "users",
    "freelancer_profiles",
    "jobs",
    "applications",
    "reviews",
    "messages",
)
ROLLBACK_TABLE_ORDER: tuple[str, ...] = tuple(reversed(SEED_TABLE_ORDER))

EXPECTED_COUNTS: dict[str, int] = {
    "users": EMPLOYER_COUNT + FREELANCER_COUNT,
    "freelancer_profiles": FREELANCER_COUNT,
    "jobs": JOB_COUNT,
    "applications": APPLICATION_COUNT,
    "reviews": REVIEW_COUNT,
    "messages": MESSAGE_COUNT,
}

JOB_CATEGORIES: tuple[str, ...] = (
    "Web Development",
    "Mobile App",
    "Design",
    "Data Science",
    "Marketing",
)
EXPERIENCE_LEVELS: tuple[str, ...] = ("entry", "intermediate", "expert")

PROFILE_SKILLS: tuple[str, ...] = ("JavaScript", "TypeScript", "React", "Node.js")
JOB_SKILLS: tuple[str, ...] = ("JavaScript", "TypeScript", "React", "Python")
