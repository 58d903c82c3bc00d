# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Enrollment models: students, class sections, enrollments and the waitlist.

A student enrolls in one class section per attended day. A class section is
identified by (location, day, label, session) where session is the term code
(e.g. SPRING_2026) and label is A or B.
"""

from __future__ import annotations

from datetime import datetime
from uuid import uuid4

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    text,
)
from sqlalchemy.dialects.postgresql import ARRAY, UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from baila_admin.infrastructure.database.models.base import Base, TimestampMixin
from baila_admin.utils.datetime import utc_now


def _uuid_column() -> Mapped[str]:
    return mapped_column(
        UUID(as_uuid=False),
        primary_key=True,
        default=lambda: str(uuid4()),
        server_default=text("gen_random_uuid()"),
    )


class Student(Base, TimestampMixin):
    """A registered child and their parent's contact and payment details.

    selected_days and start_date are what the parent chose at registration;
    the admin views reconcile them against the enrollment rows.
    """

    __tablename__ = "students"

    id: Mapped[str] = _uuid_column()
    student_name: Mapped[str] = mapped_column(String(200), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    parent_name: Mapped[str] = mapped_column(String(200), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(String(20), nullable=False)
    frequency: Mapped[str] = mapped_column(
        String(20), nullable=False, default="ONCE_A_WEEK"
    )
    selected_days: Mapped[list[str]] = mapped_column(
        ARRAY(String(20)), nullable=False, default=list, server_default="{}"
    )
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    session: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    payment_status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="PENDING", server_default="PENDING"
    )
    payment_method: Mapped[str | None] = mapped_column(String(50), nullable=True)
    liability_accepted: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default="false"
    )
    waiver_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    waiver_address: Mapped[str | None] = mapped_column(Text, nullable=True)

    enrollments: Mapped[list[Enrollment]] = relationship(
        back_populates="student",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<Student {self.student_name} ({self.location})>"


class ClassSection(Base):
    """One weekly class slot at a location for a term."""

    __tablename__ = "class_sections"
    __table_args__ = (
        UniqueConstraint(
            "location", "day", "label", "session", name="uq_class_section_slot"
        ),
    )

    id: Mapped[str] = _uuid_column()
    location: Mapped[str] = mapped_column(String(20), nullable=False)
    day: Mapped[str] = mapped_column(String(20), nullable=False)
    label: Mapped[str] = mapped_column(String(1), nullable=False)
    session: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    start_date: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True
    )
    capacity: Mapped[int | None] = mapped_column(Integer, nullable=True)

    enrollments: Mapped[list[Enrollment]] = relationship(back_populates="section")

    @property
    def slot_key(self) -> str:
        """Key used for configured capacity overrides, e.g. "KATY|Tuesday|A"."""
        return f"{self.location}|{self.day}|{self.label}"

    def __repr__(self) -> str:
        return f"<ClassSection {self.slot_key} {self.session}>"


class Enrollment(Base):
    """Join row between a student and a class section."""

    __tablename__ = "enrollments"

    id: Mapped[str] = _uuid_column()
    student_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        ForeignKey("students.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    section_id: Mapped[str] = mapped_column(
        UUID(as_uuid=False),
        ForeignKey("class_sections.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="ACTIVE", server_default="ACTIVE"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )

    student: Mapped[Student] = relationship(back_populates="enrollments")
    section: Mapped[ClassSection] = relationship(back_populates="enrollments")


class WaitingListEntry(Base):
    """A family waiting for a spot on a given day."""

    __tablename__ = "waiting_list"

    id: Mapped[str] = _uuid_column()
    student_name: Mapped[str] = mapped_column(String(200), nullable=False)
    age: Mapped[int] = mapped_column(Integer, nullable=False)
    parent_name: Mapped[str] = mapped_column(String(200), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(String(20), nullable=False)
    requested_day: Mapped[str] = mapped_column(String(20), nullable=False)
    session: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utc_now
    )
