# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Class section seed data.

Creates an A and a B section for every day a location offers in the term's
price table. Existing sections are left untouched, so the seed can be run
again after prices change.

Usage:
    python -m baila_admin.infrastructure.database.seeds.sections SPRING_2026 2026-01-12
"""

import asyncio
import logging
from datetime import date, datetime, timedelta, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from baila_admin.domains.pricing import PriceTable
from baila_admin.domains.roster.reconciliation import parse_weekday
from baila_admin.infrastructure.database.models import ClassSection
from baila_admin.models.common import SessionLabel

logger = logging.getLogger(__name__)


def first_class_on(day: str, term_start: date) -> datetime:
    """First date on or after term_start that falls on the given weekday.

    Raises:
        ValueError: If day is not a weekday name.
    """
    weekday = parse_weekday(day)
    if weekday is None:
        raise ValueError(f"Unknown day: {day}")

    offset = (weekday.order - 1 - term_start.weekday()) % 7
    first = term_start + timedelta(days=offset)
    return datetime(first.year, first.month, first.day, tzinfo=timezone.utc)


async def seed_class_sections(
    session: AsyncSession,
    term: str,
    term_start: date,
    table: PriceTable,
    capacity: int | None = None,
) -> list[ClassSection]:
    """Create the term's missing class sections.

    Args:
        session: Database session.
        term: Term code, e.g. SPRING_2026.
        term_start: First day of the term.
        table: The term's price table; days priced 0 get no sections.
        capacity: Capacity for new sections. None leaves them unlimited.

    Returns:
        The newly created sections.
    """
    result = await session.execute(
        select(ClassSection).where(ClassSection.session == term)
    )
    existing = {s.slot_key for s in result.scalars().all()}

    created = []
    for location in sorted(table.prices):
        for day in table.offered_days(location):
            for label in SessionLabel:
                section = ClassSection(
                    location=location,
                    day=day,
                    label=label.value,
                    session=term,
                    start_date=first_class_on(day, term_start),
                    capacity=capacity,
                )
                if section.slot_key in existing:
                    continue
                session.add(section)
                created.append(section)

    await session.flush()
    logger.info("Seeded %d class sections for %s", len(created), term)
    return created


if __name__ == "__main__":
    import sys

    from baila_admin.core.config import get_settings
    from baila_admin.domains.pricing import PriceBook
    from baila_admin.infrastructure.database.connection import (
        close_database,
        get_session,
        init_database,
    )
    from baila_admin.utils.logging import setup_logging

    async def main(term: str, term_start: date) -> None:
        settings = get_settings()
        setup_logging(settings)
        await init_database(settings)
        table = PriceBook.from_file(settings.enrollment.pricing_file).for_term(term)
        try:
            async with get_session() as session:
                await seed_class_sections(session, term, term_start, table)
        finally:
            await close_database()

    if len(sys.argv) != 3:
        sys.exit("usage: sections.py TERM YYYY-MM-DD")

    asyncio.run(main(sys.argv[1], date.fromisoformat(sys.argv[2])))
