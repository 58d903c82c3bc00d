# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student roster schemas for the admin API."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from baila_admin.models.common import (
    APIModel,
    Frequency,
    Location,
    Money,
    PaymentStatus,
    SessionLabel,
)


class AdminStudent(APIModel):
    """A student as shown on the admin dashboard.

    Schedule fields (selected_days, session_label, start_date,
    start_dates_by_day, frequency) are reconciled from enrollments;
    tuition and amount_owed come from the term's price table.
    """

    id: UUID
    student_name: str
    age: int
    parent_name: str
    phone: str
    email: str
    location: Location
    session: str
    frequency: Frequency
    selected_days: list[str]
    start_date: datetime | None
    session_label: SessionLabel | None = None
    start_dates_by_day: dict[str, datetime] = Field(default_factory=dict)
    payment_status: PaymentStatus
    payment_method: str | None = None
    liability_accepted: bool = False
    waiver_name: str | None = None
    waiver_address: str | None = None
    tuition: Money
    amount_owed: Money


class StudentPaymentUpdate(APIModel):
    """Patch for a student's payment fields.

    Only fields present in the request body are written; an explicit null
    payment method clears it.
    """

    id: UUID
    payment_status: PaymentStatus | None = None
    payment_method: str | None = Field(default=None, max_length=50)
