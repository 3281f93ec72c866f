# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User management API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, require_permission
from src.models import CoreModule, PermissionAction, User
from src.schemas.common import MessageResponse
from src.schemas.user import (
    UserCreate,
    UserDetailResponse,
    UserResponse,
    UserUpdate,
)
from src.services import user_service

router = APIRouter()


@router.get(
    "/users",
    response_model=list[UserResponse],
    summary="List all users",
)
def list_users(
    db: Session = Depends(get_db),
    current_user: User = Depends(
        require_permission(CoreModule.USERS, PermissionAction.READ)
    ),
) -> list[UserResponse]:
    """Retrieve all users with the names of their groups."""
    return user_service.get_users(db)


@router.post(
    "/users",
    response_model=UserDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
)
def create_user(
    user_in: UserCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(
        require_permission(CoreModule.USERS, PermissionAction.CREATE)
    ),
) -> UserDetailResponse:
    """Create a new user. The user starts without any group."""
    user = user_service.create_user(db, user_in)
    return UserDetailResponse.model_validate(user)


@router.get(
    "/users/{user_id}",
    response_model=UserDetailResponse,
    summary="Get a user by ID",
)
def get_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(
        require_permission(CoreModule.USERS, PermissionAction.READ)
    ),
) -> UserDetailResponse:
    """Retrieve a specific user with their groups."""
    return UserDetailResponse.model_validate(user_service.get_user(db, user_id))


@router.put(
    "/users/{user_id}",
    response_model=UserDetailResponse,
    summary="Update a user",
)
def update_user(
    user_id: int,
    user_in: UserUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(
        require_permission(CoreModule.USERS, PermissionAction.UPDATE)
    ),
) -> UserDetailResponse:
    """Update a user's username, email or password."""
    user_service.update_user(db, user_id, user_in)
    return UserDetailResponse.model_validate(user_service.get_user(db, user_id))


@router.delete(
    "/users/{user_id}",
    response_model=MessageResponse,
    summary="Delete a user",
)
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(
        require_permission(CoreModule.USERS, PermissionAction.DELETE)
    ),
) -> MessageResponse:
    """Delete a user. Users cannot delete their own account."""
    user_service.delete_user(db, user_id, current_user_id=current_user.id)
    return MessageResponse(message="User deleted successfully")
