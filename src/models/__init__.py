# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from src.models.associations import GroupRole, RolePermission, UserGroup
from src.models.base import Base, TimestampMixin
from src.models.enums import CoreModule, PermissionAction
from src.models.group import Group
from src.models.module import Module
from src.models.permission import Permission
from src.models.role import Role
from src.models.user import User

__all__ = [
    "Base",
    "CoreModule",
    "Group",
    "GroupRole",
    "Module",
    "Permission",
    "PermissionAction",
    "Role",
    "RolePermission",
    "TimestampMixin",
    "User",
    "UserGroup",
]
