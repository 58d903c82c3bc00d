# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Reports domain package.

This package provides the dashboard reports including:
- Earnings summary and registration totals
- Day rosters, search, owes-first ordering and pagination
- mailto: links for parents and the waitlist
- CSV, Excel and PDF roster exports
"""

from baila_admin.domains.reports.contact import (
    WAITLIST_SUBJECT,
    build_bcc_mailto,
    unique_emails,
)
from baila_admin.domains.reports.export import (
    ExportFormat,
    export_filename,
    export_roster,
    file_safe,
)
from baila_admin.domains.reports.service import (
    ReportService,
    ReportServiceError,
    RosterExport,
    UnknownDayError,
    UnsupportedFormatError,
    parse_format,
    resolve_day,
)
from baila_admin.domains.reports.summary import (
    earnings_summary,
    paginate,
    search_students,
    students_on_day,
    unpaid_first,
)

__all__ = [
    "WAITLIST_SUBJECT",
    "build_bcc_mailto",
    "unique_emails",
    "ExportFormat",
    "export_filename",
    "export_roster",
    "file_safe",
    "ReportService",
    "ReportServiceError",
    "RosterExport",
    "UnknownDayError",
    "UnsupportedFormatError",
    "parse_format",
    "resolve_day",
    "earnings_summary",
    "paginate",
    "search_students",
    "students_on_day",
    "unpaid_first",
]
