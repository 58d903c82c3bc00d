# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Dashboard report calculations over the admin roster.

All functions are pure and work on lists of AdminStudent.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from decimal import Decimal

from baila_admin.models.common import PaymentStatus, Weekday
from baila_admin.models.reports import EarningsSummary, StudentPage
from baila_admin.models.student import AdminStudent

ALL_DAYS = "all"
DEFAULT_PER_PAGE = 5


def earnings_summary(students: Sequence[AdminStudent]) -> EarningsSummary:
    """Paid/unpaid counts and money totals.

    Earned is the tuition of PAID students; outstanding is the tuition of
    PENDING and FAILED students. Percentages treat FAILED as unpaid.
    """
    paid_count = unpaid_count = failed_count = 0
    earned = Decimal(0)
    outstanding = Decimal(0)

    for student in students:
        if student.payment_status == PaymentStatus.PAID:
            paid_count += 1
            earned += student.tuition
        elif student.payment_status == PaymentStatus.PENDING:
            unpaid_count += 1
            outstanding += student.tuition
        elif student.payment_status == PaymentStatus.FAILED:
            failed_count += 1
            outstanding += student.tuition

    total_count = paid_count + unpaid_count + failed_count
    paid_pct = (paid_count / total_count) * 100 if total_count else 0.0

    return EarningsSummary(
        paid_count=paid_count,
        unpaid_count=unpaid_count,
        failed_count=failed_count,
        total_count=total_count,
        earned=earned,
        outstanding=outstanding,
        paid_pct=paid_pct,
        unpaid_pct=100 - paid_pct,
        total_registrations=total_registrations(students),
    )


def total_registrations(students: Sequence[AdminStudent]) -> int:
    """Attended days summed over all students."""
    return sum(len(s.selected_days) for s in students)


def students_on_day(
    students: Sequence[AdminStudent],
    day: Weekday | None,
) -> list[AdminStudent]:
    """Students attending a weekday; everyone when day is None."""
    if day is None:
        return list(students)
    return [s for s in students if day.value in s.selected_days]


def search_students(students: Sequence[AdminStudent], query: str | None) -> list[AdminStudent]:
    """Case-insensitive substring match on student name, parent name and email."""
    term = (query or "").strip().lower()
    if not term:
        return list(students)

    return [
        s
        for s in students
        if term in s.student_name.lower()
        or term in s.parent_name.lower()
        or term in s.email.lower()
    ]


def unpaid_first(students: Sequence[AdminStudent]) -> list[AdminStudent]:
    """Students who owe money first; order within each group is kept."""
    return sorted(students, key=lambda s: 0 if s.amount_owed > 0 else 1)


def paginate(
    students: Sequence[AdminStudent],
    page: int = 1,
    per_page: int = DEFAULT_PER_PAGE,
) -> StudentPage:
    """Slice one page out of a list.

    Args:
        students: Full list.
        page: 1-based page number. Pages past the end are empty.
        per_page: Page size, at least 1.

    Raises:
        ValueError: If page or per_page is below 1.
    """
    if page < 1:
        raise ValueError("page must be >= 1")
    if per_page < 1:
        raise ValueError("per_page must be >= 1")

    total = len(students)
    start = (page - 1) * per_page

    return StudentPage(
        items=list(students[start : start + per_page]),
        page=page,
        per_page=per_page,
        total=total,
        total_pages=math.ceil(total / per_page),
    )
