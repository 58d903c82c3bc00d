# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Password hashing utilities using bcrypt.

The admin password is configured as a bcrypt hash (ADMIN_PASSWORD_HASH).
Generate one with:

    python -m baila_admin.domains.auth.password

Example:
    >>> hasher = PasswordHasher()
    >>> hashed = hasher.hash("my_password")
    >>> hasher.verify("my_password", hashed)
    True
"""

import getpass
import logging

import bcrypt

logger = logging.getLogger(__name__)


class PasswordHasher:
    """Password hashing using bcrypt.

    Attributes:
        _rounds: Number of bcrypt rounds for hashing.
    """

    def __init__(self, rounds: int = 12) -> None:
        """Initialize the password hasher.

        Args:
            rounds: Number of bcrypt rounds. Higher is more secure but slower.
        """
        self._rounds = rounds

    def hash(self, password: str) -> str:
        """Hash a password using bcrypt.

        Args:
            password: Plain text password to hash.

        Returns:
            Bcrypt hash string with salt embedded.

        Raises:
            ValueError: If password is empty.
        """
        if not password:
            raise ValueError("Password cannot be empty")

        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        Args:
            password: Plain text password to verify.
            password_hash: Bcrypt hash to verify against.

        Returns:
            True if password matches the hash, False otherwise.
        """
        if not password or not password_hash:
            return False

        try:
            return bcrypt.checkpw(
                password.encode("utf-8"),
                password_hash.encode("utf-8"),
            )
        except ValueError as e:
            # Malformed hash in configuration
            logger.warning("Password verification failed: %s", str(e))
            return False


_default_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    """Hash a password using the default hasher."""
    return _default_hasher.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password using the default hasher."""
    return _default_hasher.verify(password, password_hash)


if __name__ == "__main__":
    print(hash_password(getpass.getpass("Admin password: ")))
