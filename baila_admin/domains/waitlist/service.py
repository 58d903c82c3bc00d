# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Waitlist service."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from baila_admin.infrastructure.database.models import WaitingListEntry
from baila_admin.models.waitlist import WaitlistEntryResponse

logger = logging.getLogger(__name__)


class WaitlistService:
    """Read access to the waiting list.

    Attributes:
        db: Async database session.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_entries(self, session: str) -> list[WaitlistEntryResponse]:
        """Waitlist entries of a term, newest first.

        Args:
            session: Term code.

        Returns:
            Waitlist entries.
        """
        query = (
            select(WaitingListEntry)
            .where(WaitingListEntry.session == session)
            .order_by(WaitingListEntry.created_at.desc())
        )
        result = await self.db.execute(query)
        entries = result.scalars().all()

        logger.debug("Listed waitlist: session=%s, count=%d", session, len(entries))

        return [WaitlistEntryResponse.model_validate(e) for e in entries]
