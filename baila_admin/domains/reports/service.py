# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Report service for the dashboard summary, search, mail links and exports.

Reports are computed from the reconciled roster, so a student's days and
amount owed match what the student list shows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from baila_admin.domains.pricing import PriceBook
from baila_admin.domains.reports.contact import WAITLIST_SUBJECT, build_bcc_mailto
from baila_admin.domains.reports.export import (
    ExportFormat,
    export_filename,
    export_roster,
)
from baila_admin.domains.reports.summary import (
    ALL_DAYS,
    DEFAULT_PER_PAGE,
    earnings_summary,
    paginate,
    search_students,
    students_on_day,
    unpaid_first,
)
from baila_admin.domains.roster.reconciliation import parse_weekday
from baila_admin.domains.roster.service import RosterService
from baila_admin.domains.waitlist.service import WaitlistService
from baila_admin.models.common import Weekday
from baila_admin.models.reports import EarningsSummary, MailtoLink, StudentPage
from baila_admin.models.student import AdminStudent

logger = logging.getLogger(__name__)


class ReportServiceError(Exception):
    """Base exception for report service errors."""

    pass


class UnknownDayError(ReportServiceError):
    """Raised when a roster is requested for something that is not a weekday."""

    pass


class UnsupportedFormatError(ReportServiceError):
    """Raised for an export format other than csv, xlsx or pdf."""

    pass


@dataclass(frozen=True)
class RosterExport:
    """A rendered roster file."""

    filename: str
    media_type: str
    content: bytes


def resolve_day(day: str) -> Weekday | None:
    """Parse a roster day; "all" selects every student.

    Raises:
        UnknownDayError: If day is neither "all" nor a weekday name.
    """
    if day.strip().lower() == ALL_DAYS:
        return None

    weekday = parse_weekday(day)
    if weekday is None:
        raise UnknownDayError(f"Unknown day: {day}")
    return weekday


def parse_format(value: str) -> ExportFormat:
    """Raises UnsupportedFormatError for unknown extensions."""
    try:
        return ExportFormat(value.strip().lower())
    except ValueError as e:
        raise UnsupportedFormatError(f"Unsupported export format: {value}") from e


class ReportService:
    """Dashboard reports for a term.

    Attributes:
        db: Async database session.
        roster: Roster service used to load the term's students.
    """

    def __init__(self, db: AsyncSession, price_book: PriceBook) -> None:
        self.db = db
        self.roster = RosterService(db, price_book)

    async def summary(self, session: str) -> EarningsSummary:
        """Earnings and registration totals for a term."""
        students = await self.roster.list_students(session)
        return earnings_summary(students)

    async def day_roster(self, session: str, day: str) -> list[AdminStudent]:
        """Students attending a weekday, or everyone for "all".

        Raises:
            UnknownDayError: If day is not recognized.
        """
        weekday = resolve_day(day)
        students = await self.roster.list_students(session)
        return students_on_day(students, weekday)

    async def search(
        self,
        session: str,
        query: str | None = None,
        owes_first: bool = False,
        page: int = 1,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> StudentPage:
        """Search the roster and return one page of matches.

        Args:
            session: Term code.
            query: Text matched against student name, parent name and email.
            owes_first: Put students with an amount owed first.
            page: 1-based page number.
            per_page: Page size.
        """
        students = await self.roster.list_students(session)
        matches = search_students(students, query)
        if owes_first:
            matches = unpaid_first(matches)
        return paginate(matches, page=page, per_page=per_page)

    async def day_mailto(self, session: str, day: str) -> MailtoLink:
        """BCC link for the parents of a day's students.

        Raises:
            UnknownDayError: If day is not recognized.
        """
        students = await self.day_roster(session, day)
        return build_bcc_mailto(s.email for s in students)

    async def waitlist_mailto(self, session: str) -> MailtoLink:
        """BCC link for every family on the term's waitlist."""
        entries = await WaitlistService(self.db).list_entries(session)
        return build_bcc_mailto((e.email for e in entries), subject=WAITLIST_SUBJECT)

    async def export_day(self, session: str, day: str, fmt: str) -> RosterExport:
        """Render a day roster as csv, xlsx or pdf.

        Raises:
            UnknownDayError: If day is not recognized.
            UnsupportedFormatError: If fmt is not supported.
        """
        export_format = parse_format(fmt)
        weekday = resolve_day(day)
        title = weekday.value if weekday else "All"

        students = await self.day_roster(session, day)
        content = export_roster(students, title, export_format)

        logger.info(
            "Exported roster: session=%s, day=%s, format=%s, students=%d",
            session,
            title,
            export_format.value,
            len(students),
        )

        return RosterExport(
            filename=export_filename(title, export_format),
            media_type=export_format.media_type,
            content=content,
        )
