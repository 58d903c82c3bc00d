# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Enrollment move schemas."""

from uuid import UUID

from pydantic import field_validator

from baila_admin.models.common import APIModel, SessionLabel


class MoveEnrollmentRequest(APIModel):
    """Move a student into the section for (day, label) at their location.

    Attributes:
        student_id: Student to move.
        day: Target weekday name.
        label: Target section label.
        from_day: Day of the enrollment to move, for students enrolled on
            more than one day.
        force: Move even if the target section is full.
    """

    student_id: UUID
    day: str
    label: SessionLabel
    from_day: str | None = None
    force: bool = False

    @field_validator("day", "from_day")
    @classmethod
    def strip_day(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if not value:
            raise ValueError("day must not be empty")
        return value


class MoveEnrollmentResponse(APIModel):
    """Result of a move."""

    ok: bool = True
    section_id: UUID
    created: bool = False
