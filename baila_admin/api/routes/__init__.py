# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""API Routes package."""

from baila_admin.api.routes import health

__all__ = ["health"]
