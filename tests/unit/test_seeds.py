# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for class section seeding."""

from datetime import date, datetime, timezone
from unittest.mock import MagicMock

import pytest

from baila_admin.domains.pricing import PriceTable
from baila_admin.infrastructure.database.models import ClassSection
from baila_admin.infrastructure.database.seeds.sections import (
    first_class_on,
    seed_class_sections,
)


def existing_sections(sections):
    result = MagicMock()
    result.scalars.return_value.all.return_value = sections
    return result


class TestFirstClassOn:
    """Tests for first_class_on."""

    def test_same_day(self):
        # 2026-01-12 is a Monday
        assert first_class_on("Monday", date(2026, 1, 12)) == datetime(
            2026, 1, 12, tzinfo=timezone.utc
        )

    def test_later_in_week(self):
        assert first_class_on("thursday", date(2026, 1, 12)) == datetime(
            2026, 1, 15, tzinfo=timezone.utc
        )

    def test_wraps_to_next_week(self):
        # 2026-01-14 is a Wednesday
        assert first_class_on("Tuesday", date(2026, 1, 14)) == datetime(
            2026, 1, 20, tzinfo=timezone.utc
        )

    def test_unknown_day(self):
        with pytest.raises(ValueError):
            first_class_on("Funday", date(2026, 1, 12))


class TestSeedClassSections:
    """Tests for seed_class_sections."""

    @pytest.mark.asyncio
    async def test_creates_a_and_b_for_offered_days(self, mock_db):
        mock_db.execute.return_value = existing_sections([])

        created = await seed_class_sections(
            mock_db, "SPRING_2026", date(2026, 1, 12), PriceTable.default(), capacity=12
        )

        assert [s.slot_key for s in created] == [
            "KATY|Tuesday|A",
            "KATY|Tuesday|B",
            "KATY|Wednesday|A",
            "KATY|Wednesday|B",
            "SUGARLAND|Monday|A",
            "SUGARLAND|Monday|B",
            "SUGARLAND|Thursday|A",
            "SUGARLAND|Thursday|B",
        ]
        assert all(isinstance(s, ClassSection) for s in created)
        assert all(s.capacity == 12 and s.session == "SPRING_2026" for s in created)
        assert created[0].start_date == datetime(2026, 1, 13, tzinfo=timezone.utc)
        assert mock_db.add.call_count == 8
        mock_db.flush.assert_called_once()

    @pytest.mark.asyncio
    async def test_skips_existing_slots(self, mock_db, make_section):
        mock_db.execute.return_value = existing_sections(
            [make_section(day="Tuesday", label="A"), make_section(day="Tuesday", label="B")]
        )

        created = await seed_class_sections(
            mock_db, "SPRING_2026", date(2026, 1, 12), PriceTable.default()
        )

        keys = [s.slot_key for s in created]
        assert "KATY|Tuesday|A" not in keys
        assert "KATY|Tuesday|B" not in keys
        assert len(created) == 6
        assert all(s.capacity is None for s in created)
