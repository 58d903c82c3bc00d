"""Baila Admin Backend.

Admin API for the Baila Kids dance-class enrollment system: student rosters,
payment tracking, class sections, waitlists and roster exports.

Copyright (C) 2026 Baila Kids Dance
SPDX-License-Identifier: LGPL-3.0-or-later
"""

__version__ = "1.0.0"
