# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Group management API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, require_permission
from src.models import CoreModule, PermissionAction, User
from src.schemas.common import AssignmentResponse, MessageResponse, RemovalResponse
from src.schemas.group import (
    GroupCreate,
    GroupDetailResponse,
    GroupResponse,
    GroupRolesRequest,
    GroupUpdate,
    GroupUsersRequest,
)
from src.services import assignment_service, group_service

router = APIRouter()

can_update_groups = require_permission(CoreModule.GROUPS, PermissionAction.UPDATE)


@router.get("/groups", response_model=list[GroupResponse], summary="List all groups")
def list_groups(
    db: Session = Depends(get_db),
    current_user: User = Depends(
        require_permission(CoreModule.GROUPS, PermissionAction.READ)
    ),
) -> list[GroupResponse]:
    """Retrieve all groups with their user and role counts."""
    return group_service.get_groups(db)


@router.get(
    "/groups/{group_id}",
    response_model=GroupDetailResponse,
    summary="Get a group with its users and roles",
)
def get_group(
    group_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(
        require_permission(CoreModule.GROUPS, PermissionAction.READ)
    ),
) -> GroupDetailResponse:
    """Retrieve a group including its current users and roles."""
    return GroupDetailResponse.model_validate(group_service.get_group(db, group_id))


@router.post(
    "/groups",
    response_model=GroupDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new group",
)
def create_group(
    group_in: GroupCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(
        require_permission(CoreModule.GROUPS, PermissionAction.CREATE)
    ),
) -> GroupDetailResponse:
    """Create an empty group."""
    group = group_service.create_group(db, group_in)
    return GroupDetailResponse.model_validate(group_service.get_group(db, group.id))


@router.put(
    "/groups/{group_id}",
    response_model=GroupDetailResponse,
    summary="Update a group",
)
def update_group(
    group_id: int,
    group_in: GroupUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(can_update_groups),
) -> GroupDetailResponse:
    """Update a group's name or description."""
    group_service.update_group(db, group_id, group_in)
    return GroupDetailResponse.model_validate(group_service.get_group(db, group_id))


@router.delete(
    "/groups/{group_id}", response_model=MessageResponse, summary="Delete a group"
)
def delete_group(
    group_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(
        require_permission(CoreModule.GROUPS, PermissionAction.DELETE)
    ),
) -> MessageResponse:
    """Delete a group. Its users and roles are kept, only the links go."""
    group_service.delete_group(db, group_id)
    return MessageResponse(message="Group deleted successfully")


@router.post(
    "/groups/{group_id}/users",
    response_model=AssignmentResponse,
    summary="Assign users to a group",
)
def assign_users(
    group_id: int,
    body: GroupUsersRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(can_update_groups),
) -> AssignmentResponse:
    """Add users to a group. Users already in the group are left as they are."""
    count = assignment_service.add_users_to_group(db, group_id, body.user_ids)
    return AssignmentResponse(
        message="Users assigned to group successfully", assigned_count=count
    )


@router.delete(
    "/groups/{group_id}/users",
    response_model=RemovalResponse,
    summary="Remove users from a group",
)
def remove_users(
    group_id: int,
    body: GroupUsersRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(can_update_groups),
) -> RemovalResponse:
    """Remove users from a group and report how many were removed."""
    count = assignment_service.remove_users_from_group(db, group_id, body.user_ids)
    return RemovalResponse(
        message="Users removed from group successfully", removed_count=count
    )


@router.post(
    "/groups/{group_id}/roles",
    response_model=AssignmentResponse,
    summary="Assign roles to a group",
)
def assign_roles(
    group_id: int,
    body: GroupRolesRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(can_update_groups),
) -> AssignmentResponse:
    """Grant roles to a group."""
    count = assignment_service.add_roles_to_group(db, group_id, body.role_ids)
    return AssignmentResponse(
        message="Roles assigned to group successfully", assigned_count=count
    )


@router.delete(
    "/groups/{group_id}/roles",
    response_model=RemovalResponse,
    summary="Remove roles from a group",
)
def remove_roles(
    group_id: int,
    body: GroupRolesRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(can_update_groups),
) -> RemovalResponse:
    """Revoke roles from a group and report how many were removed."""
    count = assignment_service.remove_roles_from_group(db, group_id, body.role_ids)
    return RemovalResponse(
        message="Roles removed from group successfully", removed_count=count
    )
