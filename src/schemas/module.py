# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Module schemas."""
import datetime

from pydantic import BaseModel, ConfigDict, Field

from src.schemas.common import TimestampedResponse


class ModuleCreate(BaseModel):
    """Schema for creating a module."""

    name: str = Field(..., min_length=3, max_length=100)
    description: str | None = Field(None, max_length=500)


class ModuleUpdate(BaseModel):
    """Schema for updating a module."""

    name: str | None = Field(None, min_length=3, max_length=100)
    description: str | None = Field(None, max_length=500)


class ModulePermission(BaseModel):
    """A permission as listed under its module."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    action: str
    created_at: datetime.datetime


class ModuleResponse(TimestampedResponse):
    """Schema for module list entries."""

    permission_count: int = 0


class ModuleDetailResponse(TimestampedResponse):
    """Schema for a module with its permissions."""

    updated_at: datetime.datetime
    permissions: list[ModulePermission]
