# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Authentication domain package.

- JWTManager: access token creation and validation (python-jose)
- PasswordHasher: bcrypt password hashing
- AuthService: admin login against the configured credentials
"""

from baila_admin.domains.auth.jwt import (
    ADMIN_ROLE,
    InvalidTokenError,
    JWTError,
    JWTManager,
    TokenExpiredError,
    TokenPayload,
)
from baila_admin.domains.auth.password import (
    PasswordHasher,
    hash_password,
    verify_password,
)
from baila_admin.domains.auth.service import (
    AuthService,
    AuthServiceError,
    InvalidCredentialsError,
    LoginDisabledError,
)

__all__ = [
    "ADMIN_ROLE",
    "InvalidTokenError",
    "JWTError",
    "JWTManager",
    "TokenExpiredError",
    "TokenPayload",
    "PasswordHasher",
    "hash_password",
    "verify_password",
    "AuthService",
    "AuthServiceError",
    "InvalidCredentialsError",
    "LoginDisabledError",
]
