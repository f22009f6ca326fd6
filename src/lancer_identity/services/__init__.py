"""Identity services."""

from lancer_identity.services.password_service import (
    PASSWORD_ALPHABET,
    PasswordHashingService,
    generate_password,
)

__all__ = [
    "PASSWORD_ALPHABET",
    "PasswordHashingService",
    "generate_password",
]
