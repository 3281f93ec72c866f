# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Group schemas."""
import datetime

from pydantic import BaseModel, ConfigDict, Field, PositiveInt

from src.schemas.common import RoleSummary, TimestampedResponse, UserSummary


class GroupCreate(BaseModel):
    """Schema for creating a group."""

    name: str = Field(..., min_length=3, max_length=100)
    description: str | None = Field(None, max_length=500)


class GroupUpdate(BaseModel):
    """Schema for updating a group."""

    name: str | None = Field(None, min_length=3, max_length=100)
    description: str | None = Field(None, max_length=500)


class GroupResponse(TimestampedResponse):
    """Schema for group list entries with membership counts."""

    user_count: int = 0
    role_count: int = 0


class GroupDetailResponse(TimestampedResponse):
    """Schema for a group with its current users and roles."""

    updated_at: datetime.datetime
    users: list[UserSummary]
    roles: list[RoleSummary]


class GroupUsersRequest(BaseModel):
    """Set of user ids to add to or remove from a group."""

    model_config = ConfigDict(populate_by_name=True)

    user_ids: list[PositiveInt] = Field(..., min_length=1, alias="userIds")


class GroupRolesRequest(BaseModel):
    """Set of role ids to grant to or revoke from a group."""

    model_config = ConfigDict(populate_by_name=True)

    role_ids: list[PositiveInt] = Field(..., min_length=1, alias="roleIds")
