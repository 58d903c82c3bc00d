# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Admin authentication endpoints.

- POST /login - Exchange the admin username and password for a JWT
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from baila_admin.api.dependencies import get_auth_service
from baila_admin.domains.auth.service import (
    AuthService,
    InvalidCredentialsError,
    LoginDisabledError,
)
from baila_admin.models.auth import LoginRequest, TokenResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Admin login",
    description="Check the admin credentials and return a bearer token.",
)
async def login(
    data: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> TokenResponse:
    try:
        return service.login(data.username, data.password)
    except LoginDisabledError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=str(e),
        )
    except InvalidCredentialsError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
