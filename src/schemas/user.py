# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User schemas."""
import datetime
import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from src.schemas.common import GroupSummary

USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9]+$")


def _check_username(v: str) -> str:
    if not USERNAME_PATTERN.match(v):
        raise ValueError("Username must contain only alphanumeric characters")
    return v


class UserBase(BaseModel):
    """Base user schema."""

    username: str = Field(..., min_length=3, max_length=30)
    email: EmailStr

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        return _check_username(v)


class UserCreate(UserBase):
    """Schema for creating a user."""

    password: str = Field(..., min_length=6)


class UserUpdate(BaseModel):
    """Schema for updating a user (admin use)."""

    username: Optional[str] = Field(None, min_length=3, max_length=30)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=6)

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: Optional[str]) -> Optional[str]:
        if v is not None:
            return _check_username(v)
        return v


class UserResponse(BaseModel):
    """Schema for user list entries: the user plus their group names."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    created_at: datetime.datetime
    updated_at: datetime.datetime
    groups: list[str] = []


class UserDetailResponse(BaseModel):
    """Schema for a single user with the groups they belong to."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    created_at: datetime.datetime
    updated_at: datetime.datetime
    groups: list[GroupSummary] = []
