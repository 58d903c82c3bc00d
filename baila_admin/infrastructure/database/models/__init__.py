# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""SQLAlchemy models for the enrollment database."""

from baila_admin.infrastructure.database.models.base import Base, TimestampMixin
from baila_admin.infrastructure.database.models.enrollment import (
    ClassSection,
    Enrollment,
    Student,
    WaitingListEntry,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "Student",
    "ClassSection",
    "Enrollment",
    "WaitingListEntry",
]
