# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Roster domain package.

This package provides the student roster views including:
- Reconciling enrollment rows into one schedule per student
- Listing students with tuition and amount owed
- Payment status updates
"""

from baila_admin.domains.roster.reconciliation import (
    EnrollmentAggregate,
    EnrollmentRow,
    StudentSchedule,
    aggregate_enrollments,
    day_sort_key,
    frequency_for,
    normalize_day,
    parse_weekday,
    reconcile_schedule,
    sort_days,
)
from baila_admin.domains.roster.service import (
    RosterService,
    RosterServiceError,
    StudentNotFoundError,
)

__all__ = [
    "EnrollmentAggregate",
    "EnrollmentRow",
    "StudentSchedule",
    "aggregate_enrollments",
    "day_sort_key",
    "frequency_for",
    "normalize_day",
    "parse_weekday",
    "reconcile_schedule",
    "sort_days",
    "RosterService",
    "RosterServiceError",
    "StudentNotFoundError",
]
