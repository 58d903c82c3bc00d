# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Enrollment-to-schedule reconciliation.

A student has one enrollment row per attended class section. The admin views
need a single denormalized schedule per student instead:

- selected_days: weekdays with an active enrollment, in week order
- session_label: the A/B label most of the student's sections carry
- start_dates_by_day: earliest section start date for each weekday
- start_date: earliest start date overall
- frequency: twice a week when two or more days are selected

Everything here is pure and works on in-memory rows; the roster service
feeds it the result of one join query.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import datetime

from baila_admin.models.common import EnrollmentStatus, Frequency, SessionLabel, Weekday
from baila_admin.utils.datetime import ensure_utc

UNKNOWN_DAY_ORDER = 99

_WEEKDAYS_BY_NAME = {day.value.lower(): day for day in Weekday}


def parse_weekday(name: str | None) -> Weekday | None:
    """Match a day name case-insensitively, ignoring surrounding whitespace."""
    if not name:
        return None
    return _WEEKDAYS_BY_NAME.get(name.strip().lower())


def normalize_day(name: str) -> str:
    """Canonical spelling for known weekdays, stripped text otherwise."""
    weekday = parse_weekday(name)
    return weekday.value if weekday else name.strip()


def day_sort_key(name: str) -> tuple[int, str]:
    """Sort key putting weekdays in week order and unknown names last."""
    weekday = parse_weekday(name)
    return (weekday.order if weekday else UNKNOWN_DAY_ORDER, name)


def sort_days(days: Iterable[str]) -> list[str]:
    """Deduplicate and order day names (Monday first, unknown names last)."""
    unique = {normalize_day(day) for day in days if day and day.strip()}
    return sorted(unique, key=day_sort_key)


@dataclass(frozen=True)
class EnrollmentRow:
    """One enrollment joined with its class section."""

    student_id: str | None
    day: str | None
    label: str | None
    start_date: datetime | None
    status: str | None = EnrollmentStatus.ACTIVE.value

    @property
    def is_active(self) -> bool:
        # Rows without a status predate the column and count as active
        return self.status in (None, EnrollmentStatus.ACTIVE.value)


@dataclass
class EnrollmentAggregate:
    """Running totals of one student's active enrollments."""

    days: set[str] = field(default_factory=set)
    starts: list[datetime] = field(default_factory=list)
    label_votes: dict[str, int] = field(
        default_factory=lambda: {label.value: 0 for label in SessionLabel}
    )
    start_by_day: dict[str, datetime] = field(default_factory=dict)

    def add(self, row: EnrollmentRow) -> None:
        day = normalize_day(row.day) if row.day and row.day.strip() else None
        if day:
            self.days.add(day)

        if row.label in self.label_votes:
            self.label_votes[row.label] += 1

        start = ensure_utc(row.start_date)
        if start is None:
            return
        self.starts.append(start)
        if day:
            earliest = self.start_by_day.get(day)
            if earliest is None or start < earliest:
                self.start_by_day[day] = start

    @property
    def majority_label(self) -> str | None:
        """Most frequent label; ties go to A, None when no row had a label."""
        a_votes = self.label_votes[SessionLabel.A.value]
        b_votes = self.label_votes[SessionLabel.B.value]
        if a_votes == 0 and b_votes == 0:
            return None
        return SessionLabel.A.value if a_votes >= b_votes else SessionLabel.B.value


@dataclass(frozen=True)
class StudentSchedule:
    """Reconciled schedule for one student."""

    selected_days: list[str]
    session_label: str | None
    start_dates_by_day: dict[str, datetime]
    start_date: datetime | None
    frequency: Frequency


def aggregate_enrollments(rows: Iterable[EnrollmentRow]) -> dict[str, EnrollmentAggregate]:
    """Group active enrollment rows by student.

    Rows without a student id and inactive rows are skipped, so a student
    whose rows are all withdrawn gets no aggregate at all.
    """
    by_student: dict[str, EnrollmentAggregate] = {}
    for row in rows:
        if not row.student_id or not row.is_active:
            continue
        by_student.setdefault(row.student_id, EnrollmentAggregate()).add(row)
    return by_student


def frequency_for(selected_days: Sequence[str]) -> Frequency:
    """Twice a week for two or more selected days, otherwise once."""
    if len(selected_days) >= 2:
        return Frequency.TWICE_A_WEEK
    return Frequency.ONCE_A_WEEK


def reconcile_schedule(
    aggregate: EnrollmentAggregate | None,
    fallback_days: Sequence[str] | None = None,
    fallback_start_date: datetime | None = None,
) -> StudentSchedule:
    """Build the schedule view for one student.

    Enrollment data wins; the student's registration choices
    (fallback_days, fallback_start_date) are used only where the enrollments
    say nothing.

    Args:
        aggregate: The student's aggregated active enrollments, if any.
        fallback_days: Days chosen at registration.
        fallback_start_date: Start date recorded at registration.

    Returns:
        The reconciled schedule.
    """
    if aggregate is not None:
        selected_days = sort_days(aggregate.days)
    else:
        selected_days = sort_days(fallback_days or [])

    if aggregate is not None and aggregate.starts:
        start_date = min(aggregate.starts)
    else:
        start_date = ensure_utc(fallback_start_date)

    start_dates_by_day: dict[str, datetime] = {}
    if aggregate is not None:
        for day in sorted(aggregate.start_by_day, key=day_sort_key):
            if parse_weekday(day) is not None:
                start_dates_by_day[day] = aggregate.start_by_day[day]

    return StudentSchedule(
        selected_days=selected_days,
        session_label=aggregate.majority_label if aggregate is not None else None,
        start_dates_by_day=start_dates_by_day,
        start_date=start_date,
        frequency=frequency_for(selected_days),
    )
