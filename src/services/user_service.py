# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""User management service."""

import logging

from sqlalchemy.orm import Session, selectinload

from src.database import transaction
from src.exceptions import (
    ConflictError,
    InvalidInputError,
    NotFoundError,
    SelfDeletionError,
)
from src.models import User
from src.schemas.user import UserCreate, UserResponse, UserUpdate
from src.security import get_password_hash

logger = logging.getLogger(__name__)


def get_user_by_id(db: Session, user_id: int) -> User | None:
    """Get a user by ID."""
    return db.query(User).filter(User.id == user_id).first()


def get_user_by_username(db: Session, username: str) -> User | None:
    """Get a user by username."""
    return db.query(User).filter(User.username == username).first()


def get_user(db: Session, user_id: int) -> User:
    """Get a user with their groups loaded, raising NotFoundError if absent."""
    user = (
        db.query(User)
        .options(selectinload(User.groups))
        .filter(User.id == user_id)
        .first()
    )
    if not user:
        raise NotFoundError("User not found")
    return user


def get_users(db: Session) -> list[UserResponse]:
    """List all users ordered by username, each with their group names."""
    users = (
        db.query(User).options(selectinload(User.groups)).order_by(User.username).all()
    )
    return [
        UserResponse(
            id=user.id,
            username=user.username,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
            groups=[group.name for group in user.groups],
        )
        for user in users
    ]


def _ensure_unique(
    db: Session, username: str | None, email: str | None, exclude_id: int | None = None
) -> None:
    if username is not None:
        query = db.query(User.id).filter(User.username == username)
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        if query.first():
            raise ConflictError("Username already exists")

    if email is not None:
        query = db.query(User.id).filter(User.email == email)
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        if query.first():
            raise ConflictError("Email already exists")


def create_user(db: Session, data: UserCreate) -> User:
    """Create a user that belongs to no group yet."""
    with transaction(db):
        _ensure_unique(db, data.username, data.email)
        user = User(
            username=data.username,
            email=data.email,
            password_hash=get_password_hash(data.password),
        )
        db.add(user)
    db.refresh(user)
    logger.info(f"Created user {user.username} (id={user.id})")
    return user


def update_user(db: Session, user_id: int, data: UserUpdate) -> User:
    """Update username, email and/or password of a user."""
    with transaction(db):
        user = db.query(User).filter(User.id == user_id).first()
        if not user:
            raise NotFoundError("User not found")

        if data.username is None and data.email is None and data.password is None:
            raise InvalidInputError("No valid fields to update")

        _ensure_unique(db, data.username, data.email, exclude_id=user_id)

        if data.username is not None:
            user.username = data.username
        if data.email is not None:
            user.email = data.email
        if data.password is not None:
            user.password_hash = get_password_hash(data.password)
    db.refresh(user)
    return user


def delete_user(db: Session, user_id: int, current_user_id: int) -> None:
    """Delete a user; their group memberships are removed with them.

    A user can never delete their own account, whatever their permissions.
    """
    with transaction(db):
        user = db.query(User).filter(User.id == user_id).first()
        if not user:
            raise NotFoundError("User not found")
        if user.id == current_user_id:
            raise SelfDeletionError("Cannot delete your own account")
        db.delete(user)
    logger.info(f"Deleted user id={user_id}")
