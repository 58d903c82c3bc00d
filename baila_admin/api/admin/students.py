# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Student roster endpoints.

- GET / - List the term's students with reconciled schedules
- PUT / - Update a student's payment status or method
- GET /{student_id} - Get one student
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from baila_admin.api.dependencies import (
    get_current_session,
    get_roster_service,
    require_admin,
)
from baila_admin.api.middleware.auth import CurrentUser
from baila_admin.domains.roster.service import RosterService, StudentNotFoundError
from baila_admin.models.common import OkResponse
from baila_admin.models.student import AdminStudent, StudentPaymentUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=list[AdminStudent],
    summary="List students",
    description="Students of a term ordered by name, with tuition and amount owed.",
)
async def list_students(
    session: str = Depends(get_current_session),
    current_user: CurrentUser = Depends(require_admin),
    service: RosterService = Depends(get_roster_service),
) -> list[AdminStudent]:
    return await service.list_students(session)


@router.put(
    "",
    response_model=OkResponse,
    summary="Update payment",
    description="Write the payment status and/or payment method present in the body.",
)
async def update_payment(
    data: StudentPaymentUpdate,
    current_user: CurrentUser = Depends(require_admin),
    service: RosterService = Depends(get_roster_service),
) -> OkResponse:
    """Update a student's payment fields.

    Args:
        data: Student id and the fields to change.
        current_user: Authenticated admin.
        service: Roster service.

    Raises:
        HTTPException: If the student does not exist.
    """
    try:
        await service.update_payment(data, updated_by=current_user.id)
    except StudentNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Student not found",
        )
    return OkResponse()


@router.get(
    "/{student_id}",
    response_model=AdminStudent,
    summary="Get student",
)
async def get_student(
    student_id: UUID,
    current_user: CurrentUser = Depends(require_admin),
    service: RosterService = Depends(get_roster_service),
) -> AdminStudent:
    try:
        return await service.get_student(student_id)
    except StudentNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Student not found",
        )
