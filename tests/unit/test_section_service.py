# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Unit tests for Section service."""

from types import SimpleNamespace
from unittest.mock import MagicMock
from uuid import UUID

import pytest
from sqlalchemy.dialects import postgresql

from baila_admin.domains.sections.service import (
    SectionNotFoundError,
    SectionService,
    is_full,
    resolve_capacity,
)


def sections_result(sections):
    result = MagicMock()
    result.scalars.return_value.all.return_value = sections
    return result


def section_result(section):
    result = MagicMock()
    result.scalar_one_or_none.return_value = section
    return result


def counts_result(counts):
    result = MagicMock()
    result.all.return_value = [
        SimpleNamespace(section_id=section_id, enrolled=enrolled)
        for section_id, enrolled in counts.items()
    ]
    return result


class TestCapacity:
    """Tests for capacity resolution."""

    def test_column_value_wins(self, make_section):
        section = make_section(capacity=8)

        assert resolve_capacity(section, {"KATY|Tuesday|A": 12}) == 8

    def test_override_used_without_column_value(self, make_section):
        section = make_section()

        assert resolve_capacity(section, {"KATY|Tuesday|A": 12}) == 12

    def test_no_capacity_anywhere(self, make_section):
        assert resolve_capacity(make_section(), {}) is None

    def test_is_full(self):
        assert is_full(10, 10) is True
        assert is_full(9, 10) is False
        assert is_full(50, None) is False


class TestListSections:
    """Tests for listing sections with occupancy."""

    @pytest.mark.asyncio
    async def test_sorted_with_counts(self, mock_db, make_section):
        """Sections are ordered by location, weekday, then label."""
        katy_wed_a = make_section(day="Wednesday", label="A")
        katy_tue_b = make_section(day="Tuesday", label="B", capacity=2)
        katy_tue_a = make_section(day="Tuesday", label="A")
        sugar_mon_a = make_section(location="SUGARLAND", day="Monday", label="A")
        mock_db.execute.side_effect = [
            sections_result([sugar_mon_a, katy_wed_a, katy_tue_b, katy_tue_a]),
            counts_result({katy_tue_b.id: 2, katy_tue_a.id: 1}),
        ]
        service = SectionService(mock_db, {"KATY|Tuesday|A": 10})

        result = await service.list_sections("SPRING_2026")

        assert [s.id for s in result] == [
            UUID(katy_tue_a.id),
            UUID(katy_tue_b.id),
            UUID(katy_wed_a.id),
            UUID(sugar_mon_a.id),
        ]
        assert result[0].enrolled == 1
        assert result[0].capacity == 10
        assert result[0].is_full is False
        assert result[1].enrolled == 2
        assert result[1].is_full is True
        assert result[2].enrolled == 0
        assert result[2].capacity is None

    @pytest.mark.asyncio
    async def test_camel_case_output(self, mock_db, make_section):
        mock_db.execute.side_effect = [
            sections_result([make_section()]),
            counts_result({}),
        ]

        result = await SectionService(mock_db).list_sections("SPRING_2026")

        data = result[0].model_dump(by_alias=True)
        assert "isFull" in data
        assert "startDate" in data


class TestFindSection:
    """Tests for slot lookups."""

    @pytest.mark.asyncio
    async def test_find_section(self, mock_db, make_section):
        section = make_section()
        mock_db.execute.return_value = section_result(section)

        result = await SectionService(mock_db).find_section(
            "KATY", "Tuesday", "A", "SPRING_2026"
        )

        assert result is section

    @pytest.mark.asyncio
    async def test_plain_lookup_does_not_lock(self, mock_db, make_section):
        mock_db.execute.return_value = section_result(make_section())

        await SectionService(mock_db).find_section("KATY", "Tuesday", "A", "SPRING_2026")

        query = mock_db.execute.call_args[0][0]
        assert "FOR UPDATE" not in str(query.compile(dialect=postgresql.dialect()))

    @pytest.mark.asyncio
    async def test_lookup_for_update_locks_row(self, mock_db, make_section):
        mock_db.execute.return_value = section_result(make_section())

        await SectionService(mock_db).find_section(
            "KATY", "Tuesday", "A", "SPRING_2026", for_update=True
        )

        query = mock_db.execute.call_args[0][0]
        assert "FOR UPDATE" in str(query.compile(dialect=postgresql.dialect()))

    @pytest.mark.asyncio
    async def test_missing_section(self, mock_db):
        mock_db.execute.return_value = section_result(None)

        with pytest.raises(SectionNotFoundError):
            await SectionService(mock_db).find_section(
                "KATY", "Monday", "A", "SPRING_2026"
            )

    @pytest.mark.asyncio
    async def test_count_active(self, mock_db):
        result = MagicMock()
        result.scalar_one.return_value = 7
        mock_db.execute.return_value = result

        assert await SectionService(mock_db).count_active("section-1") == 7
