# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Common schema types."""
import datetime

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Health check response."""

    status: str


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str


class AssignmentResponse(BaseModel):
    """Result of linking a set of entities to an owner."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    assigned_count: int = Field(alias="assignedCount")


class RemovalResponse(BaseModel):
    """Result of unlinking a set of entities from an owner."""

    model_config = ConfigDict(populate_by_name=True)

    message: str
    removed_count: int = Field(alias="removedCount")


class UserSummary(BaseModel):
    """Compact user reference used inside other responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str


class GroupSummary(BaseModel):
    """Compact group reference used inside other responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None


class RoleSummary(BaseModel):
    """Compact role reference used inside other responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None


class TimestampedResponse(BaseModel):
    """Fields shared by named entities."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    created_at: datetime.datetime
