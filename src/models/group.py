# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Group model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.base import Base, TimestampMixin

if TYPE_CHECKING:
    from src.models.role import Role
    from src.models.user import User


class Group(Base, TimestampMixin):
    """A bundle of users and roles; the only path to a user's permissions."""

    __tablename__ = "groups"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    users: Mapped[list[User]] = relationship(
        "User",
        secondary="user_groups",
        back_populates="groups",
        order_by="User.username",
        passive_deletes=True,
    )
    roles: Mapped[list[Role]] = relationship(
        "Role",
        secondary="group_roles",
        back_populates="groups",
        order_by="Role.name",
        passive_deletes=True,
    )
