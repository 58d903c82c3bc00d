# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Enrollment service for moving students between class sections.

Staff move a student to another day or to the other section (A/B) of the
same day. The target section is always at the student's own location and in
the student's own term.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from baila_admin.domains.roster.reconciliation import normalize_day, parse_weekday
from baila_admin.domains.sections.service import (
    SectionNotFoundError,
    SectionService,
    is_full,
    resolve_capacity,
)
from baila_admin.infrastructure.database.models import ClassSection, Enrollment, Student
from baila_admin.models.common import EnrollmentStatus
from baila_admin.models.enrollment import MoveEnrollmentRequest, MoveEnrollmentResponse

logger = logging.getLogger(__name__)


class EnrollmentServiceError(Exception):
    """Base exception for enrollment service errors."""

    pass


class StudentNotFoundError(EnrollmentServiceError):
    """Raised when student is not found."""

    pass


class InvalidDayError(EnrollmentServiceError):
    """Raised when a day name is not a weekday."""

    pass


class NotEnrolledError(EnrollmentServiceError):
    """Raised when the student has no enrollment on the given day."""

    pass


class AmbiguousEnrollmentError(EnrollmentServiceError):
    """Raised when it is unclear which of several enrollments to move."""

    pass


class AlreadyEnrolledError(EnrollmentServiceError):
    """Raised when the student already attends the target section."""

    pass


class SectionFullError(EnrollmentServiceError):
    """Raised when the target section has reached capacity."""

    pass


class EnrollmentService:
    """Service for moving students between sections.

    Attributes:
        db: Async database session.
        sections: Section lookups sharing the same session.
        capacity_overrides: Capacities for sections without a capacity value.
    """

    def __init__(
        self,
        db: AsyncSession,
        capacity_overrides: Mapping[str, int] | None = None,
    ) -> None:
        """Initialize enrollment service.

        Args:
            db: Async database session.
            capacity_overrides: Capacities keyed "LOCATION|Day|Label".
        """
        self.db = db
        self.capacity_overrides = dict(capacity_overrides or {})
        self.sections = SectionService(db, self.capacity_overrides)

    async def move_student(
        self,
        request: MoveEnrollmentRequest,
        moved_by: str | None = None,
    ) -> MoveEnrollmentResponse:
        """Point one of the student's enrollments at the (day, label) section.

        The enrollment moved is, in order of preference: the one on
        request.from_day, the one already on the target day, or the
        student's only enrollment for the term. A student without any
        enrollment for the term gets a new active one.

        Args:
            request: Target slot and options.
            moved_by: Admin performing the move, for the log.

        Returns:
            The target section id and whether a new enrollment was created.

        Raises:
            StudentNotFoundError: If the student does not exist.
            InvalidDayError: If day or from_day is not a weekday.
            SectionNotFoundError: If there is no section for the slot.
            NotEnrolledError: If from_day has no enrollment to move.
            AmbiguousEnrollmentError: If from_day is needed but missing.
            AlreadyEnrolledError: If another enrollment already uses the target.
            SectionFullError: If the target is full and force is not set.
        """
        student = await self._get_student(request.student_id)

        day = parse_weekday(request.day)
        if day is None:
            raise InvalidDayError(f"Unknown day: {request.day}")

        target = await self.sections.find_section(
            location=student.location,
            day=day.value,
            label=request.label.value,
            session=student.session,
            for_update=True,
        )

        enrollments = await self._active_enrollments(student)
        chosen = self._choose_enrollment(enrollments, day.value, request.from_day)

        if chosen is not None and chosen.section_id == target.id:
            logger.info(
                "Move is a no-op: student=%s already in section=%s",
                student.id,
                target.id,
            )
            return MoveEnrollmentResponse(section_id=UUID(str(target.id)))

        if any(e.section_id == target.id for e in enrollments if e is not chosen):
            raise AlreadyEnrolledError("Student already attends the target section")

        if not request.force:
            await self._check_capacity(target)

        created = chosen is None
        if chosen is not None:
            previous_section = chosen.section_id
            chosen.section_id = target.id
        else:
            previous_section = None
            self.db.add(
                Enrollment(
                    student_id=student.id,
                    section_id=target.id,
                    status=EnrollmentStatus.ACTIVE.value,
                )
            )

        await self.db.commit()

        logger.info(
            "Moved student: student=%s, from=%s, to=%s, created=%s, by=%s",
            student.id,
            previous_section,
            target.id,
            created,
            moved_by,
        )

        return MoveEnrollmentResponse(section_id=UUID(str(target.id)), created=created)

    def _choose_enrollment(
        self,
        enrollments: Sequence[Enrollment],
        target_day: str,
        from_day: str | None,
    ) -> Enrollment | None:
        """Pick the enrollment a move applies to, or None to create one."""
        if from_day is not None:
            source = parse_weekday(from_day)
            if source is None:
                raise InvalidDayError(f"Unknown day: {from_day}")
            on_day = [e for e in enrollments if normalize_day(e.section.day) == source.value]
            if not on_day:
                raise NotEnrolledError(f"Student has no enrollment on {source.value}")
            return on_day[0]

        same_day = [e for e in enrollments if normalize_day(e.section.day) == target_day]
        if same_day:
            return same_day[0]

        if not enrollments:
            return None
        if len(enrollments) == 1:
            return enrollments[0]

        raise AmbiguousEnrollmentError(
            "Student is enrolled on several days; specify which day to move"
        )

    async def _check_capacity(self, target: ClassSection) -> None:
        """Raise SectionFullError when the target has no free spot."""
        capacity = resolve_capacity(target, self.capacity_overrides)
        if capacity is None:
            return

        enrolled = await self.sections.count_active(target.id)
        if is_full(enrolled, capacity):
            raise SectionFullError(
                f"Section {target.slot_key} is full ({enrolled}/{capacity})"
            )

    async def _get_student(self, student_id: UUID) -> Student:
        """Get student by ID.

        Raises:
            StudentNotFoundError: If not found.
        """
        query = select(Student).where(Student.id == str(student_id))
        result = await self.db.execute(query)
        student = result.scalar_one_or_none()

        if not student:
            raise StudentNotFoundError(f"Student {student_id} not found")

        return student

    async def _active_enrollments(self, student: Student) -> list[Enrollment]:
        """The student's active enrollments in sections of their term."""
        query = (
            select(Enrollment)
            .options(selectinload(Enrollment.section))
            .join(ClassSection, Enrollment.section_id == ClassSection.id)
            .where(
                Enrollment.student_id == student.id,
                Enrollment.status == EnrollmentStatus.ACTIVE.value,
                ClassSection.session == student.session,
            )
            .order_by(Enrollment.created_at.asc())
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())


__all__ = [
    "EnrollmentService",
    "EnrollmentServiceError",
    "StudentNotFoundError",
    "InvalidDayError",
    "NotEnrolledError",
    "AmbiguousEnrollmentError",
    "AlreadyEnrolledError",
    "SectionFullError",
    "SectionNotFoundError",
]
