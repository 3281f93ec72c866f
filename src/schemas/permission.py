# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission schemas."""
import datetime

from pydantic import BaseModel, ConfigDict, PositiveInt

from src.models.enums import PermissionAction
from src.schemas.common import RoleSummary


class PermissionCreate(BaseModel):
    """Schema for creating a permission on an existing module."""

    action: PermissionAction
    module_id: PositiveInt


class PermissionUpdate(BaseModel):
    """Only the action of a permission can change."""

    action: PermissionAction


class PermissionSummary(BaseModel):
    """A permission together with the module it belongs to."""

    id: int
    action: str
    module_id: int
    module_name: str


class PermissionResponse(PermissionSummary):
    """Schema for permission list entries."""

    created_at: datetime.datetime
    role_count: int = 0


class PermissionDetailResponse(PermissionSummary):
    """Schema for a permission with the roles holding it."""

    created_at: datetime.datetime
    roles: list[RoleSummary]


class ActionEntry(BaseModel):
    """Permission id and action, as listed inside a module group."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    action: str


class ModulePermissionGroup(BaseModel):
    """All permissions of one module, for assignment pickers."""

    module_id: int
    module_name: str
    permissions: list[ActionEntry]
