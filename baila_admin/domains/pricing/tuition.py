# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tuition price tables and owed-amount rules.

Prices are keyed by location and then by weekday name (once-a-week
students) or "both" (twice-a-week students). Amounts are whole dollars held
as Decimal.

Example:
    >>> table = PriceTable.default()
    >>> tuition_for(table, "KATY", Frequency.ONCE_A_WEEK, ["Tuesday"])
    Decimal('245')
    >>> amount_owed(table, PaymentStatus.PAID, "KATY", Frequency.TWICE_A_WEEK, [])
    Decimal('0')
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any

from baila_admin.core.config.yaml_loader import YAMLLoadError, deep_merge, load_yaml
from baila_admin.models.common import Frequency, Location, PaymentStatus

logger = logging.getLogger(__name__)

BOTH_DAYS_KEY = "both"

DEFAULT_PRICES: dict[str, dict[str, int]] = {
    Location.KATY.value: {
        "Monday": 0,
        "Tuesday": 245,
        "Wednesday": 245,
        "Thursday": 0,
        BOTH_DAYS_KEY: 450,
    },
    Location.SUGARLAND.value: {
        "Monday": 230,
        "Tuesday": 0,
        "Wednesday": 0,
        "Thursday": 245,
        BOTH_DAYS_KEY: 450,
    },
}

ZERO = Decimal("0")


class PricingError(Exception):
    """Raised when a price table cannot be built."""

    pass


def _value(enum_or_str: Any) -> str:
    return getattr(enum_or_str, "value", enum_or_str)


def _to_amount(value: Any, where: str) -> Decimal:
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError) as e:
        raise PricingError(f"Invalid price {value!r} at {where}") from e
    if amount < 0:
        raise PricingError(f"Negative price {value!r} at {where}")
    return amount


@dataclass(frozen=True)
class PriceTable:
    """Immutable price lookup for one term.

    Attributes:
        prices: location -> (day name or "both") -> amount.
    """

    prices: Mapping[str, Mapping[str, Decimal]] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Mapping[str, Any]]) -> PriceTable:
        """Build a table from plain numbers, validating every amount.

        Raises:
            PricingError: If a location entry is not a mapping or a price is
                not a non-negative number.
        """
        prices: dict[str, dict[str, Decimal]] = {}
        for location, row in raw.items():
            if not isinstance(row, Mapping):
                raise PricingError(f"Prices for {location} must be a mapping")
            prices[str(location)] = {
                str(key): _to_amount(value, f"{location}.{key}")
                for key, value in row.items()
            }
        return cls(prices=prices)

    @classmethod
    def default(cls) -> PriceTable:
        """Table used when no term-specific prices are configured."""
        return cls.from_mapping(DEFAULT_PRICES)

    def price_for(self, location: Location | str, key: str) -> Decimal:
        """Price for a location and a day name or "both"; 0 when unknown."""
        row = self.prices.get(_value(location), {})
        return row.get(key, ZERO)

    def offered_days(self, location: Location | str) -> list[str]:
        """Day names with a non-zero once-a-week price at a location."""
        row = self.prices.get(_value(location), {})
        return [key for key, amount in row.items() if key != BOTH_DAYS_KEY and amount > 0]


def tuition_for(
    table: PriceTable,
    location: Location | str,
    frequency: Frequency | str,
    selected_days: Sequence[str],
) -> Decimal:
    """Full tuition for a student regardless of payment state.

    Once-a-week students pay the price of their (first) selected day, or
    nothing when no day is selected. Twice-a-week students pay the "both"
    price.
    """
    if _value(frequency) == Frequency.ONCE_A_WEEK.value:
        if not selected_days:
            return ZERO
        return table.price_for(location, selected_days[0])
    return table.price_for(location, BOTH_DAYS_KEY)


def amount_owed(
    table: PriceTable,
    payment_status: PaymentStatus | str,
    location: Location | str,
    frequency: Frequency | str,
    selected_days: Sequence[str],
) -> Decimal:
    """Amount still owed: zero once paid, otherwise the full tuition."""
    if _value(payment_status) == PaymentStatus.PAID.value:
        return ZERO
    return tuition_for(table, location, frequency, selected_days)


def load_price_tables(path: Path) -> dict[str, PriceTable]:
    """Load per-term price tables from a YAML file.

    Each term's entries are merged over the default table, so a file only
    needs to list the prices that differ.

    Args:
        path: YAML file mapping term code -> location -> key -> price.

    Returns:
        Mapping of term code to price table. Empty when the file is missing.

    Raises:
        PricingError: If the file exists but cannot be parsed or holds an
            invalid price.
    """
    if not path.exists():
        logger.warning("Pricing file %s not found, using default prices", path)
        return {}

    try:
        raw = load_yaml(path)
    except YAMLLoadError as e:
        raise PricingError(str(e)) from e

    tables: dict[str, PriceTable] = {}
    for term, term_prices in raw.items():
        if not isinstance(term_prices, Mapping):
            raise PricingError(f"Prices for term {term} must be a mapping")
        tables[str(term)] = PriceTable.from_mapping(
            deep_merge(DEFAULT_PRICES, dict(term_prices))
        )

    logger.info("Loaded price tables for terms: %s", ", ".join(sorted(tables)))
    return tables


class PriceBook:
    """Price tables for every configured term.

    Attributes:
        tables: Term code -> price table.
        fallback: Table for terms without their own entry.
    """

    def __init__(
        self,
        tables: Mapping[str, PriceTable] | None = None,
        fallback: PriceTable | None = None,
    ) -> None:
        self.tables = dict(tables or {})
        self.fallback = fallback or PriceTable.default()

    @classmethod
    def from_file(cls, path: Path) -> PriceBook:
        return cls(load_price_tables(path))

    def for_term(self, term: str) -> PriceTable:
        """Price table for a term, falling back to the default table."""
        return self.tables.get(term, self.fallback)
