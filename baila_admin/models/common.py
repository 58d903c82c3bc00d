# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Shared enumerations and base schema configuration.

Enum values match what is stored in the database columns.
"""

from decimal import Decimal
from enum import Enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


class Location(str, Enum):
    """Studio locations."""

    KATY = "KATY"
    SUGARLAND = "SUGARLAND"


class SessionLabel(str, Enum):
    """Class section label within a day (two sections per day)."""

    A = "A"
    B = "B"


class Weekday(str, Enum):
    """Class days, declared in calendar order."""

    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"
    SATURDAY = "Saturday"
    SUNDAY = "Sunday"

    @property
    def order(self) -> int:
        """1-based position in the week, Monday first."""
        return list(Weekday).index(self) + 1


class Frequency(str, Enum):
    """How many classes a week a student attends."""

    ONCE_A_WEEK = "ONCE_A_WEEK"
    TWICE_A_WEEK = "TWICE_A_WEEK"


class PaymentStatus(str, Enum):
    """Tuition payment state."""

    PENDING = "PENDING"
    PAID = "PAID"
    FAILED = "FAILED"


class EnrollmentStatus(str, Enum):
    """Enrollment row state."""

    ACTIVE = "ACTIVE"
    WITHDRAWN = "WITHDRAWN"


class APIModel(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire.

    The dashboard frontend sends and reads camelCase keys (studentName,
    paymentStatus, ...). Snake_case names are accepted on input as well.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# Whole-dollar amounts stay Decimal in Python and go out as JSON numbers
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class OkResponse(APIModel):
    """Acknowledgement for write endpoints."""

    ok: bool = True
