# Copyright (C) 2026 Baila Kids Dance
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Admin login schemas."""

from pydantic import Field

from baila_admin.models.common import APIModel


class LoginRequest(APIModel):
    username: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=1, max_length=200)


class TokenResponse(APIModel):
    access_token: str
    token_type: str = "Bearer"
    expires_in: int
