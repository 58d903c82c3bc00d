# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""DateTime utilities for Baila Admin.

All timestamps are stored in UTC (PostgreSQL TIMESTAMPTZ) and every Python
datetime handled by the services is timezone-aware.

Usage:
    from baila_admin.utils.datetime import utc_now

    created_at: Mapped[datetime] = mapped_column(default=utc_now)
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime."""
    return datetime.now(timezone.utc)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """Ensure a datetime is timezone-aware UTC.

    Args:
        dt: A datetime object (naive or aware) or None.

    Returns:
        Timezone-aware UTC datetime or None.

    Note:
        Naive datetimes are assumed to already be in UTC.
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)

    return dt.astimezone(timezone.utc)


def format_pretty(dt: datetime | None) -> str:
    """Format a date the way the dashboard shows it, e.g. "Tue, Jan 13, 2026".

    Returns an empty string for a missing date.
    """
    if dt is None:
        return ""
    return f"{dt:%a}, {dt:%b} {dt.day}, {dt.year}"
