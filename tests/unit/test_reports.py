# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for dashboard reports."""

from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest

from baila_admin.domains.reports import (
    ReportService,
    UnknownDayError,
    UnsupportedFormatError,
    build_bcc_mailto,
    earnings_summary,
    paginate,
    resolve_day,
    search_students,
    students_on_day,
    unique_emails,
    unpaid_first,
)
from baila_admin.models.common import Weekday


class TestEarningsSummary:
    """Tests for earnings_summary."""

    def test_counts_and_totals(self, make_admin_student):
        students = [
            make_admin_student(payment_status="PAID", tuition=Decimal(245), amount_owed=0),
            make_admin_student(payment_status="PAID", tuition=Decimal(450), amount_owed=0),
            make_admin_student(payment_status="PENDING", tuition=Decimal(230)),
            make_admin_student(payment_status="FAILED", tuition=Decimal(245)),
        ]

        summary = earnings_summary(students)

        assert summary.paid_count == 2
        assert summary.unpaid_count == 1
        assert summary.failed_count == 1
        assert summary.total_count == 4
        assert summary.earned == Decimal(695)
        assert summary.outstanding == Decimal(475)
        assert summary.paid_pct == 50.0
        assert summary.unpaid_pct == 50.0

    def test_empty_roster(self):
        summary = earnings_summary([])

        assert summary.total_count == 0
        assert summary.paid_pct == 0
        assert summary.unpaid_pct == 100
        assert summary.earned == Decimal(0)

    def test_total_registrations_counts_days(self, make_admin_student):
        students = [
            make_admin_student(selected_days=["Tuesday", "Wednesday"]),
            make_admin_student(selected_days=["Monday"]),
        ]

        assert earnings_summary(students).total_registrations == 3

    def test_money_serializes_as_number(self, make_admin_student):
        summary = earnings_summary([make_admin_student(payment_status="PAID")])

        data = summary.model_dump(mode="json", by_alias=True)

        assert data["earned"] == 245.0
        assert data["paidPct"] == 100.0


class TestRosterFilters:
    """Tests for day filter, search, ordering and paging."""

    def test_students_on_day(self, make_admin_student):
        tue = make_admin_student(selected_days=["Tuesday"])
        both = make_admin_student(selected_days=["Tuesday", "Wednesday"])

        assert students_on_day([tue, both], Weekday.WEDNESDAY) == [both]
        assert students_on_day([tue, both], None) == [tue, both]

    def test_search_matches_name_parent_and_email(self, make_admin_student):
        sofia = make_admin_student(student_name="Sofia Ramirez")
        luis = make_admin_student(
            student_name="Luis Ortega", parent_name="Marta Ortega", email="marta@example.com"
        )

        assert search_students([sofia, luis], "SOFIA") == [sofia]
        assert search_students([sofia, luis], "marta") == [luis]
        assert search_students([sofia, luis], "example.com") == [sofia, luis]
        assert search_students([sofia, luis], "  ") == [sofia, luis]
        assert search_students([sofia, luis], "nobody") == []

    def test_unpaid_first_is_stable(self, make_admin_student):
        paid_a = make_admin_student(student_name="A", amount_owed=0)
        owes_b = make_admin_student(student_name="B")
        paid_c = make_admin_student(student_name="C", amount_owed=0)
        owes_d = make_admin_student(student_name="D")

        result = unpaid_first([paid_a, owes_b, paid_c, owes_d])

        assert [s.student_name for s in result] == ["B", "D", "A", "C"]

    def test_paginate(self, make_admin_student):
        students = [make_admin_student(student_name=str(i)) for i in range(12)]

        page = paginate(students, page=3, per_page=5)

        assert [s.student_name for s in page.items] == ["10", "11"]
        assert page.total == 12
        assert page.total_pages == 3

    def test_paginate_past_end_is_empty(self, make_admin_student):
        page = paginate([make_admin_student()], page=4)

        assert page.items == []
        assert page.total_pages == 1

    @pytest.mark.parametrize("page,per_page", [(0, 5), (1, 0)])
    def test_paginate_rejects_bad_bounds(self, page, per_page):
        with pytest.raises(ValueError):
            paginate([], page=page, per_page=per_page)


class TestMailto:
    """Tests for BCC mailto links."""

    def test_unique_emails_trims_and_dedups(self):
        emails = [" a@x.com", "a@x.com", "", None, "b@y.com "]

        assert unique_emails(emails) == ["a@x.com", "b@y.com"]

    def test_bcc_link_encoding(self):
        link = build_bcc_mailto(["a@x.com", "b@y.com"])

        assert link.href == "mailto:?bcc=a%40x.com%2Cb%40y.com"
        assert link.recipients == ["a@x.com", "b@y.com"]

    def test_subject_is_encoded(self):
        link = build_bcc_mailto(["a@x.com"], subject="Class (Tuesday)")

        assert link.href == "mailto:?bcc=a%40x.com&subject=Class%20(Tuesday)"

    def test_empty_list(self):
        assert build_bcc_mailto([]).href == "mailto:?bcc="


class TestResolveDay:
    """Tests for roster day parsing."""

    def test_all(self):
        assert resolve_day("all") is None
        assert resolve_day(" ALL ") is None

    def test_weekday(self):
        assert resolve_day("thursday") is Weekday.THURSDAY

    def test_unknown(self):
        with pytest.raises(UnknownDayError):
            resolve_day("someday")


@pytest.fixture
def report_service(mock_db, price_book):
    """Report service whose roster is mocked."""
    service = ReportService(mock_db, price_book)
    service.roster.list_students = AsyncMock()
    return service


class TestReportService:
    """Tests for ReportService."""

    @pytest.mark.asyncio
    async def test_search_pages_owing_students_first(
        self, report_service, make_admin_student
    ):
        paid = make_admin_student(student_name="Ana", amount_owed=0)
        owes = make_admin_student(student_name="Bea")
        report_service.roster.list_students.return_value = [paid, owes]

        page = await report_service.search("SPRING_2026", owes_first=True, per_page=1)

        assert [s.student_name for s in page.items] == ["Bea"]
        assert page.total_pages == 2

    @pytest.mark.asyncio
    async def test_day_mailto(self, report_service, make_admin_student):
        report_service.roster.list_students.return_value = [
            make_admin_student(email="a@x.com", selected_days=["Monday"]),
            make_admin_student(email="b@y.com", selected_days=["Tuesday"]),
        ]

        link = await report_service.day_mailto("SPRING_2026", "Monday")

        assert link.recipients == ["a@x.com"]

    @pytest.mark.asyncio
    async def test_waitlist_mailto_has_subject(self, report_service):
        entries = [SimpleNamespace(email="w@x.com"), SimpleNamespace(email=" w@x.com")]
        with patch(
            "baila_admin.domains.reports.service.WaitlistService.list_entries",
            new=AsyncMock(return_value=entries),
        ):
            link = await report_service.waitlist_mailto("SPRING_2026")

        assert link.recipients == ["w@x.com"]
        assert link.href.endswith("&subject=Baila%20Kids%20%E2%80%93%20Waitlist%20Update")

    @pytest.mark.asyncio
    async def test_export_day(self, report_service, make_admin_student):
        report_service.roster.list_students.return_value = [make_admin_student()]

        export = await report_service.export_day("SPRING_2026", "tuesday", "CSV")

        assert export.filename == "tuesday-students.csv"
        assert export.media_type.startswith("text/csv")
        assert b"Sofia Ramirez" in export.content

    @pytest.mark.asyncio
    async def test_export_all_days(self, report_service, make_admin_student):
        report_service.roster.list_students.return_value = [make_admin_student()]

        export = await report_service.export_day("SPRING_2026", "all", "pdf")

        assert export.filename == "all-students.pdf"
        assert export.content.startswith(b"%PDF")

    @pytest.mark.asyncio
    async def test_export_unknown_format(self, report_service):
        with pytest.raises(UnsupportedFormatError):
            await report_service.export_day("SPRING_2026", "tuesday", "docx")

        report_service.roster.list_students.assert_not_called()

    @pytest.mark.asyncio
    async def test_export_unknown_day(self, report_service):
        with pytest.raises(UnknownDayError):
            await report_service.export_day("SPRING_2026", "someday", "csv")
