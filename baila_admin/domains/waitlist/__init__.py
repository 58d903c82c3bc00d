# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Waitlist domain package."""

from baila_admin.domains.waitlist.service import WaitlistService

__all__ = ["WaitlistService"]
