# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role management service."""

import logging

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from src.database import transaction
from src.exceptions import ConflictError, NotFoundError
from src.models import GroupRole, Module, Permission, Role, RolePermission
from src.schemas.permission import PermissionSummary
from src.schemas.role import RoleCreate, RoleResponse, RoleUpdate

logger = logging.getLogger(__name__)


def get_role_by_name(db: Session, name: str) -> Role | None:
    """Get a role by its name."""
    return db.query(Role).filter(Role.name == name).first()


def get_role(db: Session, role_id: int) -> Role:
    """Get a role with the groups holding it, raising NotFoundError if absent."""
    role = (
        db.query(Role)
        .options(selectinload(Role.groups))
        .filter(Role.id == role_id)
        .first()
    )
    if not role:
        raise NotFoundError("Role not found")
    return role


def get_role_permissions(db: Session, role_id: int) -> list[PermissionSummary]:
    """List the permissions a role holds, ordered by module name then action."""
    rows = (
        db.query(Permission.id, Permission.action, Module.id, Module.name)
        .join(RolePermission, RolePermission.permission_id == Permission.id)
        .join(Module, Module.id == Permission.module_id)
        .filter(RolePermission.role_id == role_id)
        .order_by(Module.name, Permission.action)
        .all()
    )
    return [
        PermissionSummary(
            id=perm_id, action=action, module_id=module_id, module_name=module_name
        )
        for perm_id, action, module_id, module_name in rows
    ]


def get_roles(db: Session) -> list[RoleResponse]:
    """List all roles ordered by name with their group and permission counts."""
    group_counts = (
        db.query(GroupRole.role_id, func.count(GroupRole.group_id).label("n"))
        .group_by(GroupRole.role_id)
        .subquery()
    )
    permission_counts = (
        db.query(
            RolePermission.role_id, func.count(RolePermission.permission_id).label("n")
        )
        .group_by(RolePermission.role_id)
        .subquery()
    )
    rows = (
        db.query(
            Role,
            func.coalesce(group_counts.c.n, 0),
            func.coalesce(permission_counts.c.n, 0),
        )
        .outerjoin(group_counts, group_counts.c.role_id == Role.id)
        .outerjoin(permission_counts, permission_counts.c.role_id == Role.id)
        .order_by(Role.name)
        .all()
    )
    return [
        RoleResponse(
            id=role.id,
            name=role.name,
            description=role.description,
            created_at=role.created_at,
            group_count=group_count,
            permission_count=permission_count,
        )
        for role, group_count, permission_count in rows
    ]


def create_role(db: Session, data: RoleCreate) -> Role:
    """Create a role holding no permissions."""
    with transaction(db):
        if get_role_by_name(db, data.name):
            raise ConflictError("Role name already exists")
        role = Role(name=data.name, description=data.description)
        db.add(role)
    db.refresh(role)
    return role


def update_role(db: Session, role_id: int, data: RoleUpdate) -> Role:
    """Rename a role and/or change its description."""
    with transaction(db):
        role = db.query(Role).filter(Role.id == role_id).first()
        if not role:
            raise NotFoundError("Role not found")

        if data.name is not None:
            existing = get_role_by_name(db, data.name)
            if existing and existing.id != role_id:
                raise ConflictError("Role name already exists")
            role.name = data.name

        if data.description is not None:
            role.description = data.description
    db.refresh(role)
    return role


def delete_role(db: Session, role_id: int) -> None:
    """Delete a role.

    Its group grants and permission links are removed; the permissions
    themselves remain.
    """
    with transaction(db):
        role = db.query(Role).filter(Role.id == role_id).first()
        if not role:
            raise NotFoundError("Role not found")
        db.delete(role)
    logger.info(f"Deleted role id={role_id}")
