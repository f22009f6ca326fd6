"""Password hashing service using scrypt.

Hashes are stored as ``<hex digest>.<hex salt>``, the format the
marketplace's login verifier expects. The hex text of the salt (not its raw
bytes) is what gets fed to scrypt.
"""

import hashlib
import hmac
import random
import secrets
import string

from lancer_identity.exceptions import WeakPasswordError

PASSWORD_ALPHABET = string.ascii_letters + string.digits + "!@#$%^&*"


def generate_password(rng: random.Random | None = None, length: int = 16) -> str:
    """Generate a random password of letters, digits and symbols.

    Parameters
    ----------
    rng
        Random source. Defaults to ``secrets.SystemRandom``; pass a seeded
        ``random.Random`` only when reproducible output matters (tests).
    length
        Number of characters
    """
    rng = rng or secrets.SystemRandom()
    return "".join(rng.choice(PASSWORD_ALPHABET) for _ in range(length))


class PasswordHashingService:
    """Service for password hashing and verification.

    Examples
    --------
    >>> service = PasswordHashingService(cost=1024)
    >>> stored = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", stored)
    True
    >>> service.verify("wrong_password", stored)
    False
    """

    # Password requirements
    MIN_LENGTH = 8
    MAX_LENGTH = 128

    SALT_BYTES = 16
    KEY_LENGTH = 64
    BLOCK_SIZE = 8
    PARALLELISM = 1

    def __init__(self, cost: int = 16384):
        """Initialize the password hashing service.

        Parameters
        ----------
        cost
            The scrypt CPU/memory cost ``N``; must be a power of two.
            16384 matches the marketplace's verifier.
        """
        self._cost = cost

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The ``<hash>.<salt>`` encoded credential

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        self.validate_strength(password)
        salt = secrets.token_hex(self.SALT_BYTES)
        return f"{self._derive(password, salt)}.{salt}"

    def verify(self, password: str, stored: str) -> bool:
        """Verify a password against a stored ``<hash>.<salt>`` credential."""
        digest, sep, salt = stored.partition(".")
        if not sep or not digest or not salt:
            return False
        try:
            candidate = self._derive(password, salt)
        except ValueError:
            return False
        return hmac.compare_digest(candidate, digest)

    def validate_strength(self, password: str) -> None:
        """Validate that a password meets strength requirements.

        Raises
        ------
        WeakPasswordError
            If password is empty, too short or too long
        """
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password) < self.MIN_LENGTH:
            msg = f"Password must be at least {self.MIN_LENGTH} characters"
            raise WeakPasswordError(msg)

        if len(password) > self.MAX_LENGTH:
            msg = f"Password cannot exceed {self.MAX_LENGTH} characters"
            raise WeakPasswordError(msg)

    def _derive(self, password: str, salt: str) -> str:
        key = hashlib.scrypt(
            password.encode("utf-8"),
            salt=salt.encode("utf-8"),
            n=self._cost,
            r=self.BLOCK_SIZE,
            p=self.PARALLELISM,
            dklen=self.KEY_LENGTH,
        )
        return key.hex()
