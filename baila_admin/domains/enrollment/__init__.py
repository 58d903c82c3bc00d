# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Enrollment domain package.

Moves a student to another class section (day or A/B label) at their
location, checking capacity unless forced.
"""

from baila_admin.domains.enrollment.service import (
    AlreadyEnrolledError,
    AmbiguousEnrollmentError,
    EnrollmentService,
    EnrollmentServiceError,
    InvalidDayError,
    NotEnrolledError,
    SectionFullError,
    StudentNotFoundError,
)

__all__ = [
    "EnrollmentService",
    "EnrollmentServiceError",
    "StudentNotFoundError",
    "InvalidDayError",
    "NotEnrolledError",
    "AmbiguousEnrollmentError",
    "AlreadyEnrolledError",
    "SectionFullError",
]
