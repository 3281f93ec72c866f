# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication API endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.api.deps import get_app_settings, get_db
from src.config import Settings
from src.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from src.schemas.common import UserSummary
from src.services import auth_service

router = APIRouter()


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
def register(
    data: RegisterRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> AuthResponse:
    """Register a new user and return an access token."""
    user = auth_service.register_user(db, data)
    return AuthResponse(
        message="User created successfully",
        user=UserSummary.model_validate(user),
        token=auth_service.issue_token(user, settings),
    )


@router.post("/login", response_model=AuthResponse)
def login(
    data: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> AuthResponse:
    """Login and return an access token."""
    user = auth_service.authenticate(db, data.username, data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )
    return AuthResponse(
        message="Login successful",
        user=UserSummary.model_validate(user),
        token=auth_service.issue_token(user, settings),
    )
