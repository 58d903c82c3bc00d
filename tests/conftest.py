# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Pytest configuration and shared fixtures.

This module provides fixtures used across unit and integration tests:
- Mock async database sessions
- ORM-like student and section objects
- AdminStudent factories for report tests
"""

from collections.abc import Callable
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from baila_admin.domains.pricing import PriceBook, PriceTable
from baila_admin.models.student import AdminStudent

SPRING = "SPRING_2026"


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture
def mock_db() -> AsyncMock:
    """Create mock database session."""
    db = AsyncMock()
    db.add = MagicMock()
    db.flush = AsyncMock()
    db.commit = AsyncMock()
    db.execute = AsyncMock()
    return db


# =============================================================================
# Model Fixtures
# =============================================================================


@pytest.fixture
def price_book() -> PriceBook:
    """Price book holding only the built-in default table."""
    return PriceBook({}, fallback=PriceTable.default())


@pytest.fixture
def make_student() -> Callable[..., MagicMock]:
    """Factory for ORM-like student rows."""

    def _make(**overrides: Any) -> MagicMock:
        student = MagicMock()
        student.id = str(uuid4())
        student.student_name = "Sofia Ramirez"
        student.age = 6
        student.parent_name = "Ana Ramirez"
        student.phone = "281-555-0100"
        student.email = "ana@example.com"
        student.location = "KATY"
        student.frequency = "ONCE_A_WEEK"
        student.selected_days = ["Tuesday"]
        student.start_date = datetime(2026, 1, 13, tzinfo=timezone.utc)
        student.session = SPRING
        student.payment_status = "PENDING"
        student.payment_method = None
        student.liability_accepted = True
        student.waiver_name = "Ana Ramirez"
        student.waiver_address = None
        for key, value in overrides.items():
            setattr(student, key, value)
        return student

    return _make


@pytest.fixture
def make_section() -> Callable[..., MagicMock]:
    """Factory for ORM-like class sections."""

    def _make(**overrides: Any) -> MagicMock:
        section = MagicMock()
        section.id = str(uuid4())
        section.location = "KATY"
        section.day = "Tuesday"
        section.label = "A"
        section.session = SPRING
        section.start_date = datetime(2026, 1, 13, tzinfo=timezone.utc)
        section.capacity = None
        for key, value in overrides.items():
            setattr(section, key, value)
        section.slot_key = f"{section.location}|{section.day}|{section.label}"
        return section

    return _make


@pytest.fixture
def make_admin_student() -> Callable[..., AdminStudent]:
    """Factory for AdminStudent DTOs."""

    def _make(**overrides: Any) -> AdminStudent:
        data: dict[str, Any] = {
            "id": uuid4(),
            "student_name": "Sofia Ramirez",
            "age": 6,
            "parent_name": "Ana Ramirez",
            "phone": "281-555-0100",
            "email": "ana@example.com",
            "location": "KATY",
            "session": SPRING,
            "frequency": "ONCE_A_WEEK",
            "selected_days": ["Tuesday"],
            "start_date": datetime(2026, 1, 13, tzinfo=timezone.utc),
            "payment_status": "PENDING",
            "tuition": Decimal(245),
            "amount_owed": Decimal(245),
        }
        data.update(overrides)
        return AdminStudent(**data)

    return _make
