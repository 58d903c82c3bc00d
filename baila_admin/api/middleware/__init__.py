# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""API middleware components.

- AuthMiddleware: JWT authentication.
- RequestContextMiddleware: Request id bound to log context.
"""

from baila_admin.api.middleware.auth import AuthMiddleware, CurrentUser
from baila_admin.api.middleware.request_context import RequestContextMiddleware

__all__ = [
    "AuthMiddleware",
    "CurrentUser",
    "RequestContextMiddleware",
]
