# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Enrollment endpoints.

- PUT / - Move a student to the section for a day and label
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from baila_admin.api.dependencies import get_enrollment_service, require_admin
from baila_admin.api.middleware.auth import CurrentUser
from baila_admin.domains.enrollment.service import (
    AlreadyEnrolledError,
    AmbiguousEnrollmentError,
    EnrollmentService,
    InvalidDayError,
    NotEnrolledError,
    SectionFullError,
    StudentNotFoundError,
)
from baila_admin.domains.sections.service import SectionNotFoundError
from baila_admin.models.enrollment import MoveEnrollmentRequest, MoveEnrollmentResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.put(
    "",
    response_model=MoveEnrollmentResponse,
    summary="Move student",
    description=(
        "Point the student's enrollment at the section for (day, label) at "
        "their location. Use fromDay for students enrolled on several days."
    ),
)
async def move_student(
    data: MoveEnrollmentRequest,
    current_user: CurrentUser = Depends(require_admin),
    service: EnrollmentService = Depends(get_enrollment_service),
) -> MoveEnrollmentResponse:
    """Move a student between sections.

    Args:
        data: Target slot and options.
        current_user: Authenticated admin.
        service: Enrollment service.

    Returns:
        The target section id.

    Raises:
        HTTPException: 400 for an unknown day, 404 when the student, section
            or source enrollment is missing, 409 on conflicts.
    """
    try:
        return await service.move_student(data, moved_by=current_user.id)
    except InvalidDayError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except StudentNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Student not found",
        )
    except SectionNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Section not found",
        )
    except NotEnrolledError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except (AmbiguousEnrollmentError, AlreadyEnrolledError, SectionFullError) as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
