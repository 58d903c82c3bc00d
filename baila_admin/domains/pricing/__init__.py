# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Tuition pricing package.

- PriceTable: per-term lookup of location x day/both prices
- tuition_for / amount_owed: the owed-amount rules
- PriceBook: price tables for every configured term
"""

from baila_admin.domains.pricing.tuition import (
    BOTH_DAYS_KEY,
    DEFAULT_PRICES,
    PriceBook,
    PriceTable,
    PricingError,
    amount_owed,
    load_price_tables,
    tuition_for,
)

__all__ = [
    "BOTH_DAYS_KEY",
    "DEFAULT_PRICES",
    "PriceBook",
    "PriceTable",
    "PricingError",
    "amount_owed",
    "load_price_tables",
    "tuition_for",
]
