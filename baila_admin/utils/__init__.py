# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Utility functions and helpers for Baila Admin.

- logging: Structured logging with structlog
- datetime: Timezone-aware datetime operations
"""

from baila_admin.utils.datetime import ensure_utc, format_pretty, utc_now
from baila_admin.utils.logging import bind_context, clear_context, get_logger, setup_logging

__all__ = [
    # Logging
    "setup_logging",
    "get_logger",
    "bind_context",
    "clear_context",
    # Datetime
    "utc_now",
    "ensure_utc",
    "format_pretty",
]
