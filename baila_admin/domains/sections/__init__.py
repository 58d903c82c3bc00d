# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Class section domain package."""

from baila_admin.domains.sections.service import (
    SectionNotFoundError,
    SectionService,
    SectionServiceError,
    is_full,
    resolve_capacity,
)

__all__ = [
    "SectionService",
    "SectionServiceError",
    "SectionNotFoundError",
    "is_full",
    "resolve_capacity",
]
