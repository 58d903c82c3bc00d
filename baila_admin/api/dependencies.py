# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""FastAPI dependency injection definitions.

Dependencies are used to:
- Get database sessions
- Get the authenticated admin
- Resolve the term a request is about
- Get service instances

Example:
    @router.get("/students")
    async def list_students(
        db: AsyncSession = Depends(get_db),
        current_user: CurrentUser = Depends(require_admin),
    ):
        ...
"""

import logging
from typing import Annotated, AsyncGenerator

from fastapi import Depends, HTTPException, Query, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from baila_admin.api.middleware.auth import CurrentUser, get_current_user
from baila_admin.core.config import get_settings
from baila_admin.domains.auth.jwt import JWTManager
from baila_admin.domains.auth.service import AuthService
from baila_admin.domains.enrollment.service import EnrollmentService
from baila_admin.domains.pricing import PriceBook
from baila_admin.domains.reports.service import ReportService
from baila_admin.domains.roster.service import RosterService
from baila_admin.domains.sections.service import SectionService
from baila_admin.domains.waitlist.service import WaitlistService
from baila_admin.infrastructure.database.connection import get_session

logger = logging.getLogger(__name__)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get a database session for the request.

    Yields:
        AsyncSession committed when the request succeeds.
    """
    async with get_session() as session:
        yield session


def get_price_book(request: Request) -> PriceBook:
    """Price tables loaded at startup.

    Raises:
        HTTPException: If the application has not finished starting.
    """
    price_book = getattr(request.app.state, "price_book", None)
    if price_book is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Price tables not loaded",
        )
    return price_book


def get_current_session(
    session: Annotated[
        str | None,
        Query(description="Term code, defaults to the current term"),
    ] = None,
) -> str:
    """Term code from the query string, else the configured current term."""
    if session and session.strip():
        return session.strip()
    return get_settings().enrollment.current_session


def get_capacity_overrides() -> dict[str, int]:
    """Configured section capacities keyed "LOCATION|Day|Label"."""
    return get_settings().enrollment.section_capacities


def get_page_size() -> int:
    """Default page size for paginated lists."""
    return get_settings().enrollment.page_size


# =========================================================================
# Authentication Dependencies
# =========================================================================


def require_auth(request: Request) -> CurrentUser:
    """Require an authenticated user.

    Raises:
        HTTPException: If not authenticated.
    """
    user = get_current_user(request)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def require_admin(request: Request) -> CurrentUser:
    """Require the dashboard admin.

    Raises:
        HTTPException: If not authenticated or not admin.
    """
    user = require_auth(request)
    if not user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return user


def get_jwt_manager() -> JWTManager:
    return JWTManager(get_settings().jwt)


def get_auth_service(
    jwt_manager: JWTManager = Depends(get_jwt_manager),
) -> AuthService:
    return AuthService(get_settings().admin, jwt_manager)


# =========================================================================
# Service Dependencies
# =========================================================================


def get_roster_service(
    db: AsyncSession = Depends(get_db),
    price_book: PriceBook = Depends(get_price_book),
) -> RosterService:
    return RosterService(db, price_book)


def get_section_service(
    db: AsyncSession = Depends(get_db),
    overrides: dict[str, int] = Depends(get_capacity_overrides),
) -> SectionService:
    return SectionService(db, overrides)


def get_enrollment_service(
    db: AsyncSession = Depends(get_db),
    overrides: dict[str, int] = Depends(get_capacity_overrides),
) -> EnrollmentService:
    return EnrollmentService(db, overrides)


def get_waitlist_service(db: AsyncSession = Depends(get_db)) -> WaitlistService:
    return WaitlistService(db)


def get_report_service(
    db: AsyncSession = Depends(get_db),
    price_book: PriceBook = Depends(get_price_book),
) -> ReportService:
    return ReportService(db, price_book)
