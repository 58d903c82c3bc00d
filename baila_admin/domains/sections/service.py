# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Class section service.

This module provides the SectionService class for:
- Listing a term's class sections with active enrollment counts
- Resolving section capacity and the "full" flag
- Looking up the section for a (location, day, label, term) slot
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from baila_admin.domains.roster.reconciliation import day_sort_key
from baila_admin.infrastructure.database.models import ClassSection, Enrollment
from baila_admin.models.common import EnrollmentStatus
from baila_admin.models.section import SectionOccupancy

logger = logging.getLogger(__name__)


class SectionServiceError(Exception):
    """Base exception for section service errors."""

    pass


class SectionNotFoundError(SectionServiceError):
    """Raised when no class section matches a slot."""

    pass


def resolve_capacity(
    section: ClassSection,
    overrides: Mapping[str, int],
) -> int | None:
    """Section capacity: the column value, else the configured override.

    Args:
        section: Class section.
        overrides: Capacities keyed "LOCATION|Day|Label".

    Returns:
        Capacity, or None when the section has no limit.
    """
    if section.capacity is not None:
        return section.capacity
    return overrides.get(section.slot_key)


def is_full(enrolled: int, capacity: int | None) -> bool:
    """A section is full once active enrollments reach a known capacity."""
    return capacity is not None and enrolled >= capacity


class SectionService:
    """Service for class sections.

    Attributes:
        db: Async database session.
        capacity_overrides: Capacities for sections without a capacity value.
    """

    def __init__(
        self,
        db: AsyncSession,
        capacity_overrides: Mapping[str, int] | None = None,
    ) -> None:
        """Initialize section service.

        Args:
            db: Async database session.
            capacity_overrides: Capacities keyed "LOCATION|Day|Label".
        """
        self.db = db
        self.capacity_overrides = dict(capacity_overrides or {})

    async def list_sections(self, session: str) -> list[SectionOccupancy]:
        """List a term's sections with occupancy.

        Sections are ordered by location, then weekday (Monday first), then
        label.

        Args:
            session: Term code.

        Returns:
            Sections with enrolled count, capacity and full flag.
        """
        result = await self.db.execute(
            select(ClassSection).where(ClassSection.session == session)
        )
        sections = result.scalars().all()

        counts = await self._active_counts(session)

        ordered = sorted(
            sections,
            key=lambda s: (s.location, day_sort_key(s.day), s.label),
        )

        items = []
        for section in ordered:
            enrolled = counts.get(str(section.id), 0)
            capacity = resolve_capacity(section, self.capacity_overrides)
            items.append(
                SectionOccupancy(
                    id=UUID(str(section.id)),
                    location=section.location,
                    day=section.day,
                    label=section.label,
                    session=section.session,
                    start_date=section.start_date,
                    enrolled=enrolled,
                    capacity=capacity,
                    is_full=is_full(enrolled, capacity),
                )
            )

        logger.debug("Listed sections: session=%s, count=%d", session, len(items))
        return items

    async def find_section(
        self,
        location: str,
        day: str,
        label: str,
        session: str,
        for_update: bool = False,
    ) -> ClassSection:
        """Get the section for a slot.

        With for_update the section row stays locked until the transaction
        ends, so capacity checks and writes against it are serialized.

        Raises:
            SectionNotFoundError: If the term has no such section.
        """
        query = (
            select(ClassSection)
            .where(
                ClassSection.location == location,
                ClassSection.day == day,
                ClassSection.label == label,
                ClassSection.session == session,
            )
            .limit(1)
        )
        if for_update:
            query = query.with_for_update()
        result = await self.db.execute(query)
        section = result.scalar_one_or_none()

        if not section:
            raise SectionNotFoundError(
                f"No {label} section on {day} at {location} for {session}"
            )

        return section

    async def count_active(self, section_id: str) -> int:
        """Number of active enrollments in one section."""
        query = select(func.count(Enrollment.id)).where(
            Enrollment.section_id == section_id,
            Enrollment.status == EnrollmentStatus.ACTIVE.value,
        )
        result = await self.db.execute(query)
        return int(result.scalar_one() or 0)

    async def _active_counts(self, session: str) -> dict[str, int]:
        """Active enrollments per section id for a term."""
        query = (
            select(Enrollment.section_id, func.count(Enrollment.id).label("enrolled"))
            .join(ClassSection, Enrollment.section_id == ClassSection.id)
            .where(
                Enrollment.status == EnrollmentStatus.ACTIVE.value,
                ClassSection.session == session,
            )
            .group_by(Enrollment.section_id)
        )
        result = await self.db.execute(query)
        return {str(row.section_id): int(row.enrolled) for row in result.all()}
