# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Day roster exports as CSV, Excel and PDF.

CSV and Excel carry the full contact sheet. The PDF is the printable
class list handed to instructors: name, age and days, youngest first.
"""

from __future__ import annotations

import csv
import io
import re
from collections.abc import Sequence
from decimal import Decimal
from enum import Enum

from fpdf import FPDF
from fpdf.enums import MethodReturnValue, XPos, YPos
from openpyxl import Workbook
from openpyxl.styles import Font

from baila_admin.models.student import AdminStudent
from baila_admin.utils.datetime import format_pretty

ROSTER_HEADERS = (
    "Name",
    "Age",
    "Parent",
    "Phone",
    "Email",
    "Days",
    "Start Date",
    "Amount Owed",
)


class ExportFormat(str, Enum):
    """Supported roster export formats."""

    CSV = "csv"
    XLSX = "xlsx"
    PDF = "pdf"

    @property
    def media_type(self) -> str:
        return _MEDIA_TYPES[self]


_MEDIA_TYPES = {
    ExportFormat.CSV: "text/csv; charset=utf-8",
    ExportFormat.XLSX: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ExportFormat.PDF: "application/pdf",
}


def file_safe(title: str) -> str:
    """Lowercase, spaces to dashes, anything else outside [a-z0-9-_] dropped."""
    slug = re.sub(r"\s+", "-", title.lower())
    return re.sub(r"[^a-z0-9\-_]", "", slug)


def export_filename(title: str, fmt: ExportFormat) -> str:
    """File name for a roster export, e.g. "tuesday-students.pdf"."""
    return f"{file_safe(title)}-students.{fmt.value}"


def whole_dollars(amount: Decimal) -> int | Decimal:
    """Whole-dollar amounts as int, as the dashboard shows them; cents kept otherwise."""
    if amount == amount.to_integral_value():
        return int(amount)
    return amount.quantize(Decimal("0.01"))


def roster_rows(students: Sequence[AdminStudent]) -> list[list[object]]:
    """One row per student in ROSTER_HEADERS order."""
    return [
        [
            s.student_name,
            s.age,
            s.parent_name,
            s.phone,
            s.email,
            ", ".join(s.selected_days),
            format_pretty(s.start_date),
            whole_dollars(s.amount_owed),
        ]
        for s in students
    ]


def export_csv(students: Sequence[AdminStudent]) -> bytes:
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    writer.writerow(ROSTER_HEADERS)
    writer.writerows(roster_rows(students))
    # BOM so Excel opens accented names correctly
    return buffer.getvalue().encode("utf-8-sig")


def export_xlsx(students: Sequence[AdminStudent], title: str) -> bytes:
    wb = Workbook()
    ws = wb.active
    # Sheet titles are limited to 31 characters
    ws.title = f"{title} Students"[:31]

    ws.append(list(ROSTER_HEADERS))
    for cell in ws[1]:
        cell.font = Font(bold=True)

    for row in roster_rows(students):
        ws.append(row)

    ws.freeze_panes = "A2"

    bio = io.BytesIO()
    wb.save(bio)
    return bio.getvalue()


def sort_by_age(students: Sequence[AdminStudent]) -> list[AdminStudent]:
    """Youngest first; students without an age go last."""
    return sorted(
        students,
        key=lambda s: (s.age is None, s.age if s.age is not None else 0),
    )


def _latin1(text: str) -> str:
    # Core PDF fonts only cover Latin-1
    return text.encode("latin-1", errors="replace").decode("latin-1")


class RosterPDF(FPDF):
    """Letter-size class list with the column header repeated on every page."""

    NAME_WIDTH = 260
    AGE_WIDTH = 60
    DAYS_WIDTH = 184
    LINE_HEIGHT = 18

    def __init__(self, title: str) -> None:
        super().__init__(unit="pt", format="letter")
        self.roster_title = title
        self.set_margins(54, 72, 54)
        self.set_auto_page_break(auto=True, margin=54)

    def header(self) -> None:
        if self.page_no() == 1:
            self.set_font("helvetica", "B", 18)
            self.cell(0, 24, _latin1(f"{self.roster_title} Students"))
            self.ln(42)

        self.set_font("helvetica", "B", 12)
        self.cell(self.NAME_WIDTH, self.LINE_HEIGHT, "Name")
        self.cell(self.AGE_WIDTH, self.LINE_HEIGHT, "Age")
        self.cell(self.DAYS_WIDTH, self.LINE_HEIGHT, "Days")
        self.ln(self.LINE_HEIGHT)
        self.set_line_width(0.5)
        self.line(self.l_margin, self.get_y(), self.w - self.r_margin, self.get_y())
        self.ln(6)
        self.set_font("helvetica", "", 12)

    def wrap(self, width: float, text: str) -> list[str]:
        """Lines a text breaks into inside a column of the given width."""
        return self.multi_cell(
            width,
            self.LINE_HEIGHT,
            text,
            dry_run=True,
            output=MethodReturnValue.LINES,
        )

    def add_student(self, student: AdminStudent) -> float:
        """Draw one roster row and return its height.

        Name and days wrap inside their columns; the row is as tall as the
        column with the most lines and never splits across pages.
        """
        name = _latin1(student.student_name)
        days = _latin1(", ".join(student.selected_days))
        age = "" if student.age is None else str(student.age)

        lines = max(
            len(self.wrap(self.NAME_WIDTH, name)),
            len(self.wrap(self.DAYS_WIDTH, days)),
            1,
        )
        row_height = lines * self.LINE_HEIGHT
        if self.will_page_break(row_height):
            self.add_page()

        top = self.get_y()
        self.multi_cell(
            self.NAME_WIDTH, self.LINE_HEIGHT, name, new_x=XPos.RIGHT, new_y=YPos.TOP
        )
        self.cell(self.AGE_WIDTH, self.LINE_HEIGHT, age)
        self.multi_cell(
            self.DAYS_WIDTH, self.LINE_HEIGHT, days, new_x=XPos.LMARGIN, new_y=YPos.TOP
        )
        self.set_y(top + row_height + 8)
        return row_height


def export_pdf(students: Sequence[AdminStudent], title: str) -> bytes:
    """Printable roster titled "<title> Students", sorted by age."""
    pdf = RosterPDF(title)
    pdf.add_page()
    for student in sort_by_age(students):
        pdf.add_student(student)
    return bytes(pdf.output())


def export_roster(
    students: Sequence[AdminStudent],
    title: str,
    fmt: ExportFormat,
) -> bytes:
    """Render a roster in the requested format."""
    if fmt is ExportFormat.CSV:
        return export_csv(students)
    if fmt is ExportFormat.XLSX:
        return export_xlsx(students, title)
    return export_pdf(students, title)
