# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Dashboard report schemas: revenue summary, paged search, mail links."""

from pydantic import Field

from baila_admin.models.common import APIModel, Money
from baila_admin.models.student import AdminStudent


class EarningsSummary(APIModel):
    """Revenue overview for a term.

    FAILED payments count as unpaid in the percentages and as outstanding
    in the totals.
    """

    paid_count: int
    unpaid_count: int
    failed_count: int
    total_count: int
    earned: Money
    outstanding: Money
    paid_pct: float
    unpaid_pct: float
    total_registrations: int = Field(
        description="Sum of attended days over all students",
    )


class StudentPage(APIModel):
    """One page of a student list."""

    items: list[AdminStudent]
    page: int
    per_page: int
    total: int
    total_pages: int


class MailtoLink(APIModel):
    """A prepared mailto: link and the recipients it contains."""

    href: str
    recipients: list[str]
