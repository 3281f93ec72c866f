# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication schemas."""
from pydantic import BaseModel

from src.schemas.common import UserSummary
from src.schemas.user import UserCreate


class RegisterRequest(UserCreate):
    """Schema for self-registration."""


class LoginRequest(BaseModel):
    """Schema for login request."""

    username: str
    password: str


class AuthResponse(BaseModel):
    """Schema for register and login responses."""

    message: str
    user: UserSummary
    token: str
