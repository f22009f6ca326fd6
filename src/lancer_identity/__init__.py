"""Lancer Identity - credential handling shared by the web app and tooling.

Stored credentials use the marketplace's ``<hash>.<salt>`` scrypt format, so
accounts created by tooling can log in through the regular auth flow.
"""

from lancer_identity.exceptions import AuthError, WeakPasswordError
from lancer_identity.services import (
    PASSWORD_ALPHABET,
    PasswordHashingService,
    generate_password,
)

__all__ = [
    # Exceptions
    "AuthError",
    "WeakPasswordError",
    # Services
    "PASSWORD_ALPHABET",
    "PasswordHashingService",
    "generate_password",
]
