# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Role schemas."""
import datetime

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from src.schemas.common import GroupSummary, TimestampedResponse
from src.schemas.permission import PermissionSummary


class RoleCreate(BaseModel):
    """Schema for creating a role."""

    name: str = Field(..., min_length=3, max_length=100)
    description: str | None = Field(None, max_length=500)


class RoleUpdate(BaseModel):
    """Schema for updating a role."""

    name: str | None = Field(None, min_length=3, max_length=100)
    description: str | None = Field(None, max_length=500)


class RoleResponse(TimestampedResponse):
    """Schema for role list entries with link counts."""

    group_count: int = 0
    permission_count: int = 0


class RoleDetailResponse(TimestampedResponse):
    """Schema for a role with its permissions and the groups holding it."""

    updated_at: datetime.datetime
    permissions: list[PermissionSummary]
    groups: list[GroupSummary]


class RolePermissionsRequest(BaseModel):
    """Set of permission ids to grant to or revoke from a role."""

    model_config = ConfigDict(populate_by_name=True)

    permission_ids: list[PositiveInt] = Field(
        ..., min_length=1, alias="permissionIds"
    )
