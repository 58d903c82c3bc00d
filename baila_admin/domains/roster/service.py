# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Roster service for the admin student views.

This module provides the RosterService class for:
- Listing a term's students with reconciled schedules and owed amounts
- Fetching a single student
- Updating payment status and payment method
"""

from __future__ import annotations

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from baila_admin.domains.pricing import PriceBook, PriceTable, amount_owed, tuition_for
from baila_admin.domains.roster.reconciliation import (
    EnrollmentAggregate,
    EnrollmentRow,
    aggregate_enrollments,
    reconcile_schedule,
)
from baila_admin.infrastructure.database.models import ClassSection, Enrollment, Student
from baila_admin.models.student import AdminStudent, StudentPaymentUpdate

logger = logging.getLogger(__name__)


class RosterServiceError(Exception):
    """Base exception for roster service errors."""

    pass


class StudentNotFoundError(RosterServiceError):
    """Raised when a student is not found."""

    pass


class RosterService:
    """Service for the student roster.

    Attributes:
        db: Async database session.
        price_book: Per-term tuition tables.
    """

    def __init__(self, db: AsyncSession, price_book: PriceBook) -> None:
        """Initialize roster service.

        Args:
            db: Async database session.
            price_book: Tuition tables used for amount owed.
        """
        self.db = db
        self.price_book = price_book

    async def list_students(self, session: str) -> list[AdminStudent]:
        """List a term's students ordered by name.

        Runs two queries: the term's students, and every enrollment joined
        with its class section for the term. The join rows are reconciled
        in memory into each student's schedule.

        Args:
            session: Term code, e.g. SPRING_2026.

        Returns:
            Admin views of the term's students.
        """
        query = (
            select(Student)
            .where(Student.session == session)
            .order_by(Student.student_name.asc())
        )
        result = await self.db.execute(query)
        students = result.scalars().all()

        rows = await self._enrollment_rows(session)
        aggregates = aggregate_enrollments(rows)
        table = self.price_book.for_term(session)

        logger.debug(
            "Listed roster: session=%s, students=%d, enrollment_rows=%d",
            session,
            len(students),
            len(rows),
        )

        return [self._to_admin_student(s, aggregates.get(s.id), table) for s in students]

    async def get_student(self, student_id: UUID) -> AdminStudent:
        """Get one student's admin view.

        Args:
            student_id: Student identifier.

        Returns:
            The student with reconciled schedule.

        Raises:
            StudentNotFoundError: If the student does not exist.
        """
        student = await self._get_student(student_id)
        rows = await self._enrollment_rows(student.session, student_id=student.id)
        aggregate = aggregate_enrollments(rows).get(student.id)
        return self._to_admin_student(
            student, aggregate, self.price_book.for_term(student.session)
        )

    async def update_payment(
        self,
        update: StudentPaymentUpdate,
        updated_by: str | None = None,
    ) -> None:
        """Write the payment fields present in the update.

        Args:
            update: Patch with the student id and the fields to change.
            updated_by: Admin performing the change, for the log.

        Raises:
            StudentNotFoundError: If the student does not exist.
        """
        student = await self._get_student(update.id)

        fields = update.model_fields_set
        if "payment_status" in fields and update.payment_status is not None:
            student.payment_status = update.payment_status.value
        if "payment_method" in fields:
            student.payment_method = update.payment_method

        await self.db.commit()

        logger.info(
            "Updated payment: student=%s, status=%s, method=%s, by=%s",
            student.id,
            student.payment_status,
            student.payment_method,
            updated_by,
        )

    async def _get_student(self, student_id: UUID | str) -> Student:
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

    async def _enrollment_rows(
        self,
        session: str,
        student_id: str | None = None,
    ) -> list[EnrollmentRow]:
        """Enrollments joined with their sections for a term.

        Args:
            session: Term code the sections belong to.
            student_id: Restrict to one student.
        """
        query = (
            select(
                Enrollment.student_id,
                ClassSection.day,
                ClassSection.label,
                ClassSection.start_date,
                Enrollment.status,
            )
            .join(ClassSection, Enrollment.section_id == ClassSection.id)
            .where(ClassSection.session == session)
        )
        if student_id is not None:
            query = query.where(Enrollment.student_id == student_id)

        result = await self.db.execute(query)
        return [
            EnrollmentRow(
                student_id=row.student_id,
                day=row.day,
                label=row.label,
                start_date=row.start_date,
                status=row.status,
            )
            for row in result.all()
        ]

    def _to_admin_student(
        self,
        student: Student,
        aggregate: EnrollmentAggregate | None,
        table: PriceTable,
    ) -> AdminStudent:
        """Convert a student and their enrollments to the admin DTO."""
        schedule = reconcile_schedule(
            aggregate,
            fallback_days=student.selected_days,
            fallback_start_date=student.start_date,
        )

        return AdminStudent(
            id=UUID(str(student.id)),
            student_name=student.student_name,
            age=student.age,
            parent_name=student.parent_name,
            phone=student.phone,
            email=student.email,
            location=student.location,
            session=student.session,
            frequency=schedule.frequency,
            selected_days=schedule.selected_days,
            start_date=schedule.start_date,
            session_label=schedule.session_label,
            start_dates_by_day=schedule.start_dates_by_day,
            payment_status=student.payment_status,
            payment_method=student.payment_method,
            liability_accepted=student.liability_accepted,
            waiver_name=student.waiver_name,
            waiver_address=student.waiver_address,
            tuition=tuition_for(
                table, student.location, schedule.frequency, schedule.selected_days
            ),
            amount_owed=amount_owed(
                table,
                student.payment_status,
                student.location,
                schedule.frequency,
                schedule.selected_days,
            ),
        )
