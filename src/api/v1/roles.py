# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role management API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, require_permission
from src.models import CoreModule, PermissionAction, Role, User
from src.schemas.common import (
    AssignmentResponse,
    GroupSummary,
    MessageResponse,
    RemovalResponse,
)
from src.schemas.role import (
    RoleCreate,
    RoleDetailResponse,
    RolePermissionsRequest,
    RoleResponse,
    RoleUpdate,
)
from src.services import assignment_service, role_service

router = APIRouter()

can_update_roles = require_permission(CoreModule.ROLES, PermissionAction.UPDATE)


def _build_role_detail(db: Session, role: Role) -> RoleDetailResponse:
    """Build a RoleDetailResponse with permissions and groups."""
    return RoleDetailResponse(
        id=role.id,
        name=role.name,
        description=role.description,
        created_at=role.created_at,
        updated_at=role.updated_at,
        permissions=role_service.get_role_permissions(db, role.id),
        groups=[GroupSummary.model_validate(group) for group in role.groups],
    )


@router.get("/roles", response_model=list[RoleResponse], summary="List all roles")
def list_roles(
    db: Session = Depends(get_db),
    current_user: User = Depends(
        require_permission(CoreModule.ROLES, PermissionAction.READ)
    ),
) -> list[RoleResponse]:
    """Retrieve all roles with their group and permission counts."""
    return role_service.get_roles(db)


@router.get(
    "/roles/{role_id}",
    response_model=RoleDetailResponse,
    summary="Get a role by ID with its permissions",
)
def get_role(
    role_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(
        require_permission(CoreModule.ROLES, PermissionAction.READ)
    ),
) -> RoleDetailResponse:
    """Retrieve a role with its permissions and the groups holding it."""
    return _build_role_detail(db, role_service.get_role(db, role_id))


@router.post(
    "/roles",
    response_model=RoleDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new role",
)
def create_role(
    role_in: RoleCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(
        require_permission(CoreModule.ROLES, PermissionAction.CREATE)
    ),
) -> RoleDetailResponse:
    """Create a role without permissions."""
    role = role_service.create_role(db, role_in)
    return _build_role_detail(db, role_service.get_role(db, role.id))


@router.put(
    "/roles/{role_id}",
    response_model=RoleDetailResponse,
    summary="Update an existing role",
)
def update_role(
    role_id: int,
    role_in: RoleUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(can_update_roles),
) -> RoleDetailResponse:
    """Update a role's name or description."""
    role_service.update_role(db, role_id, role_in)
    return _build_role_detail(db, role_service.get_role(db, role_id))


@router.delete("/roles/{role_id}", response_model=MessageResponse, summary="Delete a role")
def delete_role(
    role_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(
        require_permission(CoreModule.ROLES, PermissionAction.DELETE)
    ),
) -> MessageResponse:
    """Delete a role and revoke it from every group."""
    role_service.delete_role(db, role_id)
    return MessageResponse(message="Role deleted successfully")


@router.post(
    "/roles/{role_id}/permissions",
    response_model=AssignmentResponse,
    summary="Assign permissions to a role",
)
def assign_permissions(
    role_id: int,
    body: RolePermissionsRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(can_update_roles),
) -> AssignmentResponse:
    """Add permissions to a role."""
    count = assignment_service.add_permissions_to_role(
        db, role_id, body.permission_ids
    )
    return AssignmentResponse(
        message="Permissions assigned to role successfully", assigned_count=count
    )


@router.delete(
    "/roles/{role_id}/permissions",
    response_model=RemovalResponse,
    summary="Remove permissions from a role",
)
def remove_permissions(
    role_id: int,
    body: RolePermissionsRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(can_update_roles),
) -> RemovalResponse:
    """Remove permissions from a role and report how many were removed."""
    count = assignment_service.remove_permissions_from_role(
        db, role_id, body.permission_ids
    )
    return RemovalResponse(
        message="Permissions removed from role successfully", removed_count=count
    )
