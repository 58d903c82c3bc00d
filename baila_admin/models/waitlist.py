# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Waitlist schemas."""

from datetime import datetime
from uuid import UUID

from baila_admin.models.common import APIModel, Location


class WaitlistEntryResponse(APIModel):
    """One waitlist entry."""

    id: UUID
    student_name: str
    age: int
    parent_name: str
    phone: str
    email: str
    location: Location
    requested_day: str
    session: str
    notes: str | None = None
    created_at: datetime
