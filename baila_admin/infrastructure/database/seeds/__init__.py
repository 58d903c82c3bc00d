# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Database seed package.

- Class sections: A and B sections for every day offered in a term
"""

from baila_admin.infrastructure.database.seeds.sections import (
    first_class_on,
    seed_class_sections,
)

__all__ = ["first_class_on", "seed_class_sections"]
