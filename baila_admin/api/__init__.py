# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""API Layer for Baila Admin.

This module provides the FastAPI application and all HTTP endpoints.
"""

from baila_admin.api.app import create_app

__all__ = ["create_app"]
