# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum


class PermissionAction(str, Enum):
    """The four canonical actions a permission can grant."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"


class CoreModule(str, Enum):
    """Modules seeded at bootstrap; they guard the console's own routes."""

    USERS = "Users"
    GROUPS = "Groups"
    ROLES = "Roles"
    MODULES = "Modules"
    PERMISSIONS = "Permissions"
