# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission resolution.

A user holds a permission when at least one path exists through
user_groups -> group_roles -> role_permissions -> permissions -> modules.
Each check is a single SELECT, so it sees one consistent snapshot of the
association tables.
"""

import logging
from enum import Enum

from sqlalchemy import Select, literal, select
from sqlalchemy.orm import Session

from src.exceptions import ForbiddenError
from src.models import (
    Group,
    GroupRole,
    Module,
    Permission,
    PermissionAction,
    Role,
    RolePermission,
    UserGroup,
)
from src.schemas.rbac import GrantPath, SimulateActionResponse

logger = logging.getLogger(__name__)


def _value(item: str | Enum) -> str:
    return item.value if isinstance(item, Enum) else item


def _grant_join(*columns) -> Select:
    return (
        select(*columns)
        .select_from(UserGroup)
        .join(GroupRole, GroupRole.group_id == UserGroup.group_id)
        .join(RolePermission, RolePermission.role_id == GroupRole.role_id)
        .join(Permission, Permission.id == RolePermission.permission_id)
        .join(Module, Module.id == Permission.module_id)
    )


def has_permission(
    db: Session,
    user_id: int,
    module_name: str | Enum,
    action: str | PermissionAction,
) -> bool:
    """Check if a user may perform an action on a module.

    The module name is matched exactly and case-sensitively. Unknown users
    and modules simply yield False.
    """
    query = _grant_join(literal(1)).where(
        UserGroup.user_id == user_id,
        Module.name == _value(module_name),
        Permission.action == _value(action),
    )
    return bool(db.scalar(select(query.exists())))


def check_permission(
    db: Session,
    user_id: int,
    module_name: str | Enum,
    action: str | PermissionAction,
) -> None:
    """Raise ForbiddenError unless the user holds the permission."""
    if not has_permission(db, user_id, module_name, action):
        logger.debug(
            f"Denied {_value(action)} on {_value(module_name)} for user {user_id}"
        )
        raise ForbiddenError(
            f"Permission denied: {_value(action)} on {_value(module_name)}"
        )


def get_permission_map(db: Session, user_id: int) -> dict[str, set[str]]:
    """Get every action the user may perform, keyed by module name.

    Modules without any granted action are omitted; a user with no
    permissions gets an empty mapping.
    """
    rows = db.execute(
        _grant_join(Module.name, Permission.action)
        .where(UserGroup.user_id == user_id)
        .distinct()
    ).all()

    permissions: dict[str, set[str]] = {}
    for module_name, action in rows:
        permissions.setdefault(module_name, set()).add(action)
    return permissions


def get_grant_paths(
    db: Session,
    user_id: int,
    module_name: str | Enum,
    action: str | PermissionAction,
) -> list[GrantPath]:
    """List the (group, role) pairs through which a permission reaches a user."""
    rows = db.execute(
        _grant_join(Group.name, Role.name)
        .join(Group, Group.id == UserGroup.group_id)
        .join(Role, Role.id == GroupRole.role_id)
        .where(
            UserGroup.user_id == user_id,
            Module.name == _value(module_name),
            Permission.action == _value(action),
        )
        .distinct()
        .order_by(Group.name, Role.name)
    ).all()
    return [GrantPath(group=group, role=role) for group, role in rows]


def simulate_action(
    db: Session,
    user_id: int,
    module_name: str,
    action: str | PermissionAction,
) -> SimulateActionResponse:
    """Explain whether a user could perform an action, without side effects.

    A denial reads the same whether the user or module is missing or the
    grant simply does not exist.
    """
    action_value = _value(action)
    allowed = has_permission(db, user_id, module_name, action_value)
    paths: list[GrantPath] = []
    if allowed:
        paths = get_grant_paths(db, user_id, module_name, action_value)
        message = f"User can {action_value} on {module_name}"
    else:
        message = f"User cannot {action_value} on {module_name}"

    return SimulateActionResponse(
        user_id=user_id,
        module=module_name,
        action=action_value,
        has_permission=allowed,
        message=message,
        granted_via=paths,
    )
