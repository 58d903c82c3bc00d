# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Class section endpoints.

- GET / - List the term's sections with occupancy
"""

from fastapi import APIRouter, Depends

from baila_admin.api.dependencies import (
    get_current_session,
    get_section_service,
    require_admin,
)
from baila_admin.api.middleware.auth import CurrentUser
from baila_admin.domains.sections.service import SectionService
from baila_admin.models.section import SectionOccupancy

router = APIRouter()


@router.get(
    "",
    response_model=list[SectionOccupancy],
    summary="List sections",
    description="Sections ordered by location, weekday and label.",
)
async def list_sections(
    session: str = Depends(get_current_session),
    current_user: CurrentUser = Depends(require_admin),
    service: SectionService = Depends(get_section_service),
) -> list[SectionOccupancy]:
    return await service.list_sections(session)
