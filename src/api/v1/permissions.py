# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission management API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, require_permission
from src.models import CoreModule, Permission, PermissionAction, User
from src.schemas.common import MessageResponse, RoleSummary
from src.schemas.permission import (
    ModulePermissionGroup,
    PermissionCreate,
    PermissionDetailResponse,
    PermissionResponse,
    PermissionUpdate,
)
from src.services import permission_service

router = APIRouter()

can_read_permissions = require_permission(CoreModule.PERMISSIONS, PermissionAction.READ)


def _build_permission_detail(permission: Permission) -> PermissionDetailResponse:
    return PermissionDetailResponse(
        id=permission.id,
        action=permission.action,
        module_id=permission.module_id,
        module_name=permission.module.name,
        created_at=permission.created_at,
        roles=[RoleSummary.model_validate(role) for role in permission.roles],
    )


@router.get(
    "/permissions",
    response_model=list[PermissionResponse],
    summary="List all permissions",
)
def list_permissions(
    db: Session = Depends(get_db),
    current_user: User = Depends(can_read_permissions),
) -> list[PermissionResponse]:
    """Retrieve all permissions with their module and role count."""
    return permission_service.get_permissions(db)


# Declared before /permissions/{permission_id} so the literal path wins
@router.get(
    "/permissions/grouped-by-module",
    response_model=list[ModulePermissionGroup],
    summary="List permissions grouped by module",
)
def list_permissions_grouped(
    db: Session = Depends(get_db),
    current_user: User = Depends(can_read_permissions),
) -> list[ModulePermissionGroup]:
    """Retrieve all permissions grouped under their module."""
    return permission_service.get_permissions_grouped_by_module(db)


@router.get(
    "/permissions/{permission_id}",
    response_model=PermissionDetailResponse,
    summary="Get a permission with the roles holding it",
)
def get_permission(
    permission_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(can_read_permissions),
) -> PermissionDetailResponse:
    """Retrieve a permission and the roles that hold it."""
    return _build_permission_detail(
        permission_service.get_permission(db, permission_id)
    )


@router.post(
    "/permissions",
    response_model=PermissionDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new permission",
)
def create_permission(
    permission_in: PermissionCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(
        require_permission(CoreModule.PERMISSIONS, PermissionAction.CREATE)
    ),
) -> PermissionDetailResponse:
    """Create a permission for an action on an existing module."""
    permission = permission_service.create_permission(db, permission_in)
    return _build_permission_detail(
        permission_service.get_permission(db, permission.id)
    )


@router.put(
    "/permissions/{permission_id}",
    response_model=PermissionDetailResponse,
    summary="Update a permission",
)
def update_permission(
    permission_id: int,
    permission_in: PermissionUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(
        require_permission(CoreModule.PERMISSIONS, PermissionAction.UPDATE)
    ),
) -> PermissionDetailResponse:
    """Change the action of a permission."""
    permission_service.update_permission(db, permission_id, permission_in)
    return _build_permission_detail(
        permission_service.get_permission(db, permission_id)
    )


@router.delete(
    "/permissions/{permission_id}",
    response_model=MessageResponse,
    summary="Delete a permission",
)
def delete_permission(
    permission_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(
        require_permission(CoreModule.PERMISSIONS, PermissionAction.DELETE)
    ),
) -> MessageResponse:
    """Delete a permission and revoke it from every role."""
    permission_service.delete_permission(db, permission_id)
    return MessageResponse(message="Permission deleted successfully")
