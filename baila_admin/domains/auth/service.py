# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Admin login.

There is a single dashboard admin whose username and bcrypt password hash
come from AdminSettings. A successful login returns a JWT access token.
"""

import logging
import secrets

from baila_admin.core.config.settings import AdminSettings
from baila_admin.domains.auth.jwt import JWTManager
from baila_admin.domains.auth.password import verify_password
from baila_admin.models.auth import TokenResponse

logger = logging.getLogger(__name__)


class AuthServiceError(Exception):
    """Base exception for auth service errors."""

    pass


class InvalidCredentialsError(AuthServiceError):
    """Raised when username or password is wrong."""

    pass


class LoginDisabledError(AuthServiceError):
    """Raised when no admin password hash is configured."""

    pass


class AuthService:
    """Authenticates the dashboard admin.

    Attributes:
        admin: Configured admin credentials.
        jwt_manager: Token issuer.
    """

    def __init__(self, admin: AdminSettings, jwt_manager: JWTManager) -> None:
        self.admin = admin
        self.jwt_manager = jwt_manager

    def login(self, username: str, password: str) -> TokenResponse:
        """Check credentials and issue an access token.

        Args:
            username: Submitted username.
            password: Submitted plain text password.

        Returns:
            Access token and its lifetime in seconds.

        Raises:
            LoginDisabledError: If no password hash is configured.
            InvalidCredentialsError: If the credentials do not match.
        """
        password_hash = self.admin.password_hash.get_secret_value()
        if not password_hash:
            raise LoginDisabledError("Admin login is not configured")

        username_ok = secrets.compare_digest(
            username.encode("utf-8"), self.admin.username.encode("utf-8")
        )
        # Always run bcrypt so a wrong username takes as long as a wrong password
        password_ok = verify_password(password, password_hash)

        if not (username_ok and password_ok):
            logger.warning("Failed admin login: username=%s", username)
            raise InvalidCredentialsError("Invalid username or password")

        logger.info("Admin logged in: username=%s", username)

        return TokenResponse(
            access_token=self.jwt_manager.create_access_token(subject=username),
            expires_in=self.jwt_manager.expires_in,
        )
