# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Schemas for permission introspection and simulation."""
from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from src.models.enums import PermissionAction
from src.schemas.common import UserSummary


class UserPermissionsSchema(BaseModel):
    """Schema representing a user's effective permissions, keyed by module."""

    user: UserSummary
    permissions: dict[str, list[str]]


class SimulateActionRequest(BaseModel):
    """Schema for asking whether a user may perform an action on a module."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: PositiveInt = Field(alias="userId")
    module: str = Field(..., min_length=1)
    action: PermissionAction


class GrantPath(BaseModel):
    """A group and role through which a permission reaches the user."""

    group: str
    role: str


class SimulateActionResponse(BaseModel):
    """Schema for a simulated authorization decision."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: int = Field(alias="userId")
    module: str
    action: str
    has_permission: bool = Field(alias="hasPermission")
    message: str
    granted_via: list[GrantPath] = Field(default_factory=list, alias="grantedVia")
