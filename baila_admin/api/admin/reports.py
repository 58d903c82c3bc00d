# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Dashboard report endpoints.

- GET /summary - Earnings and registration totals
- GET /days/{day} - Students attending a weekday ("all" for everyone)
- GET /search - Search, owes-first ordering and pagination
- GET /mailto - BCC link for a day's parents
- GET /mailto/waitlist - BCC link for the waitlist
- GET /export/{day}.{fmt} - Roster export as csv, xlsx or pdf
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from baila_admin.api.dependencies import (
    get_current_session,
    get_page_size,
    get_report_service,
    require_admin,
)
from baila_admin.api.middleware.auth import CurrentUser
from baila_admin.domains.reports.service import (
    ReportService,
    UnknownDayError,
    UnsupportedFormatError,
)
from baila_admin.domains.reports.summary import ALL_DAYS
from baila_admin.models.reports import EarningsSummary, MailtoLink, StudentPage
from baila_admin.models.student import AdminStudent

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/summary", response_model=EarningsSummary, summary="Earnings summary")
async def summary(
    session: str = Depends(get_current_session),
    current_user: CurrentUser = Depends(require_admin),
    service: ReportService = Depends(get_report_service),
) -> EarningsSummary:
    return await service.summary(session)


@router.get("/days/{day}", response_model=list[AdminStudent], summary="Day roster")
async def day_roster(
    day: str,
    session: str = Depends(get_current_session),
    current_user: CurrentUser = Depends(require_admin),
    service: ReportService = Depends(get_report_service),
) -> list[AdminStudent]:
    try:
        return await service.day_roster(session, day)
    except UnknownDayError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/search", response_model=StudentPage, summary="Search students")
async def search(
    q: Annotated[str | None, Query(description="Name, parent or email")] = None,
    unpaid_first: Annotated[bool, Query(description="Students who owe first")] = False,
    page: Annotated[int, Query(ge=1, description="1-based page number")] = 1,
    per_page: Annotated[int | None, Query(ge=1, le=100, description="Page size")] = None,
    default_page_size: int = Depends(get_page_size),
    session: str = Depends(get_current_session),
    current_user: CurrentUser = Depends(require_admin),
    service: ReportService = Depends(get_report_service),
) -> StudentPage:
    return await service.search(
        session,
        query=q,
        owes_first=unpaid_first,
        page=page,
        per_page=per_page or default_page_size,
    )


@router.get("/mailto", response_model=MailtoLink, summary="Email a day's parents")
async def day_mailto(
    day: Annotated[str, Query(description='Weekday or "all"')] = ALL_DAYS,
    session: str = Depends(get_current_session),
    current_user: CurrentUser = Depends(require_admin),
    service: ReportService = Depends(get_report_service),
) -> MailtoLink:
    try:
        return await service.day_mailto(session, day)
    except UnknownDayError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("/mailto/waitlist", response_model=MailtoLink, summary="Email the waitlist")
async def waitlist_mailto(
    session: str = Depends(get_current_session),
    current_user: CurrentUser = Depends(require_admin),
    service: ReportService = Depends(get_report_service),
) -> MailtoLink:
    return await service.waitlist_mailto(session)


@router.get(
    "/export/{day}.{fmt}",
    response_class=Response,
    summary="Export day roster",
    description="Download a day roster as csv, xlsx or pdf.",
)
async def export_day(
    day: str,
    fmt: str,
    session: str = Depends(get_current_session),
    current_user: CurrentUser = Depends(require_admin),
    service: ReportService = Depends(get_report_service),
) -> Response:
    try:
        export = await service.export_day(session, day, fmt)
    except (UnknownDayError, UnsupportedFormatError) as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={"Content-Disposition": f'attachment; filename="{export.filename}"'},
    )
