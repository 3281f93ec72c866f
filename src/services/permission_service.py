# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission management service."""

import logging

from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload, selectinload

from src.database import transaction
from src.exceptions import ConflictError, NotFoundError
from src.models import Module, Permission, PermissionAction, RolePermission
from src.schemas.permission import (
    ActionEntry,
    ModulePermissionGroup,
    PermissionCreate,
    PermissionResponse,
    PermissionUpdate,
)

logger = logging.getLogger(__name__)


def get_permission(db: Session, permission_id: int) -> Permission:
    """Get a permission with its module and roles, raising NotFoundError if absent."""
    permission = (
        db.query(Permission)
        .options(joinedload(Permission.module), selectinload(Permission.roles))
        .filter(Permission.id == permission_id)
        .first()
    )
    if not permission:
        raise NotFoundError("Permission not found")
    return permission


def get_permissions(db: Session) -> list[PermissionResponse]:
    """List all permissions ordered by module name then action."""
    role_counts = (
        db.query(
            RolePermission.permission_id, func.count(RolePermission.role_id).label("n")
        )
        .group_by(RolePermission.permission_id)
        .subquery()
    )
    rows = (
        db.query(Permission, Module.name, func.coalesce(role_counts.c.n, 0))
        .join(Module, Module.id == Permission.module_id)
        .outerjoin(role_counts, role_counts.c.permission_id == Permission.id)
        .order_by(Module.name, Permission.action)
        .all()
    )
    return [
        PermissionResponse(
            id=permission.id,
            action=permission.action,
            module_id=permission.module_id,
            module_name=module_name,
            created_at=permission.created_at,
            role_count=role_count,
        )
        for permission, module_name, role_count in rows
    ]


def get_permissions_grouped_by_module(db: Session) -> list[ModulePermissionGroup]:
    """Group every permission under its module, ordered by module name."""
    rows = (
        db.query(Permission, Module.name)
        .join(Module, Module.id == Permission.module_id)
        .order_by(Module.name, Permission.action)
        .all()
    )

    grouped: dict[str, ModulePermissionGroup] = {}
    for permission, module_name in rows:
        if module_name not in grouped:
            grouped[module_name] = ModulePermissionGroup(
                module_id=permission.module_id,
                module_name=module_name,
                permissions=[],
            )
        grouped[module_name].permissions.append(
            ActionEntry(id=permission.id, action=permission.action)
        )
    return list(grouped.values())


def _find_by_action(
    db: Session, module_id: int, action: PermissionAction
) -> Permission | None:
    return (
        db.query(Permission)
        .filter(Permission.module_id == module_id, Permission.action == action.value)
        .first()
    )


def create_permission(db: Session, data: PermissionCreate) -> Permission:
    """Create a permission on an existing module."""
    with transaction(db):
        module = db.query(Module).filter(Module.id == data.module_id).first()
        if not module:
            raise NotFoundError("Module not found")
        if _find_by_action(db, module.id, data.action):
            raise ConflictError(
                "Permission already exists for this module and action"
            )
        permission = Permission(action=data.action.value, module_id=module.id)
        db.add(permission)
    db.refresh(permission)
    return permission


def update_permission(
    db: Session, permission_id: int, data: PermissionUpdate
) -> Permission:
    """Change the action of a permission; its module is fixed."""
    with transaction(db):
        permission = db.query(Permission).filter(Permission.id == permission_id).first()
        if not permission:
            raise NotFoundError("Permission not found")

        existing = _find_by_action(db, permission.module_id, data.action)
        if existing and existing.id != permission_id:
            raise ConflictError(
                "Permission with this action already exists for this module"
            )
        permission.action = data.action.value
    db.refresh(permission)
    return permission


def delete_permission(db: Session, permission_id: int) -> None:
    """Delete a permission; it is revoked from every role holding it."""
    with transaction(db):
        permission = db.query(Permission).filter(Permission.id == permission_id).first()
        if not permission:
            raise NotFoundError("Permission not found")
        db.delete(permission)
    logger.info(f"Deleted permission id={permission_id}")
