# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Group management service."""

import logging

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from src.database import transaction
from src.exceptions import ConflictError, NotFoundError
from src.models import Group, GroupRole, UserGroup
from src.schemas.group import GroupCreate, GroupResponse, GroupUpdate

logger = logging.getLogger(__name__)


def get_group_by_name(db: Session, name: str) -> Group | None:
    """Get a group by its name."""
    return db.query(Group).filter(Group.name == name).first()


def get_group(db: Session, group_id: int) -> Group:
    """Get a group with its users and roles, raising NotFoundError if absent."""
    group = (
        db.query(Group)
        .options(selectinload(Group.users), selectinload(Group.roles))
        .filter(Group.id == group_id)
        .first()
    )
    if not group:
        raise NotFoundError("Group not found")
    return group


def get_groups(db: Session) -> list[GroupResponse]:
    """List all groups ordered by name with their user and role counts."""
    user_counts = (
        db.query(UserGroup.group_id, func.count(UserGroup.user_id).label("n"))
        .group_by(UserGroup.group_id)
        .subquery()
    )
    role_counts = (
        db.query(GroupRole.group_id, func.count(GroupRole.role_id).label("n"))
        .group_by(GroupRole.group_id)
        .subquery()
    )
    rows = (
        db.query(
            Group,
            func.coalesce(user_counts.c.n, 0),
            func.coalesce(role_counts.c.n, 0),
        )
        .outerjoin(user_counts, user_counts.c.group_id == Group.id)
        .outerjoin(role_counts, role_counts.c.group_id == Group.id)
        .order_by(Group.name)
        .all()
    )
    return [
        GroupResponse(
            id=group.id,
            name=group.name,
            description=group.description,
            created_at=group.created_at,
            user_count=user_count,
            role_count=role_count,
        )
        for group, user_count, role_count in rows
    ]


def create_group(db: Session, data: GroupCreate) -> Group:
    """Create a group with no members and no roles."""
    with transaction(db):
        if get_group_by_name(db, data.name):
            raise ConflictError("Group name already exists")
        group = Group(name=data.name, description=data.description)
        db.add(group)
    db.refresh(group)
    return group


def update_group(db: Session, group_id: int, data: GroupUpdate) -> Group:
    """Rename a group and/or change its description."""
    with transaction(db):
        group = db.query(Group).filter(Group.id == group_id).first()
        if not group:
            raise NotFoundError("Group not found")

        if data.name is not None:
            existing = get_group_by_name(db, data.name)
            if existing and existing.id != group_id:
                raise ConflictError("Group name already exists")
            group.name = data.name

        if data.description is not None:
            group.description = data.description
    db.refresh(group)
    return group


def delete_group(db: Session, group_id: int) -> None:
    """Delete a group; its memberships and role grants go with it."""
    with transaction(db):
        group = db.query(Group).filter(Group.id == group_id).first()
        if not group:
            raise NotFoundError("Group not found")
        db.delete(group)
    logger.info(f"Deleted group id={group_id}")
