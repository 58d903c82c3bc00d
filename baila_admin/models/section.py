# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Class section schemas."""

from datetime import datetime
from uuid import UUID

from baila_admin.models.common import APIModel, Location, SessionLabel


class SectionOccupancy(APIModel):
    """A class section with its active enrollment count."""

    id: UUID
    location: Location
    day: str
    label: SessionLabel
    session: str
    start_date: datetime | None = None
    enrolled: int
    capacity: int | None = None
    is_full: bool
