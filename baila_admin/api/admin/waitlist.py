# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Waitlist endpoints.

- GET / - List the term's waitlist, newest first
"""

from fastapi import APIRouter, Depends

from baila_admin.api.dependencies import (
    get_current_session,
    get_waitlist_service,
    require_admin,
)
from baila_admin.api.middleware.auth import CurrentUser
from baila_admin.domains.waitlist.service import WaitlistService
from baila_admin.models.waitlist import WaitlistEntryResponse

router = APIRouter()


@router.get(
    "",
    response_model=list[WaitlistEntryResponse],
    summary="List waitlist",
)
async def list_waitlist(
    session: str = Depends(get_current_session),
    current_user: CurrentUser = Depends(require_admin),
    service: WaitlistService = Depends(get_waitlist_service),
) -> list[WaitlistEntryResponse]:
    return await service.list_entries(session)
