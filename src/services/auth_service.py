# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Authentication service."""

from sqlalchemy.orm import Session

from src.config import Settings
from src.models import User
from src.schemas.auth import RegisterRequest
from src.security import create_access_token, decode_access_token, verify_password
from src.services import user_service


def register_user(db: Session, data: RegisterRequest) -> User:
    """Register a new user. New users belong to no group and hold no permissions."""
    return user_service.create_user(db, data)


def authenticate(db: Session, username: str, password: str) -> User | None:
    """Authenticate a user by username and password."""
    user = user_service.get_user_by_username(db, username)
    if not user:
        return None
    if not verify_password(password, user.password_hash):
        return None
    return user


def issue_token(user: User, settings: Settings) -> str:
    """Create an access token for a user, signed with the app's secret."""
    return create_access_token(
        user.id,
        user.username,
        user.email,
        secret_key=settings.secret_key,
        algorithm=settings.jwt_algorithm,
        expire_minutes=settings.access_token_expire_minutes,
    )


def get_user_from_token(db: Session, token: str, settings: Settings) -> User | None:
    """Resolve the user identified by a token, or None if the token is invalid."""
    claims = decode_access_token(
        token, secret_key=settings.secret_key, algorithm=settings.jwt_algorithm
    )
    if not claims:
        return None
    try:
        user_id = int(claims["sub"])
    except (KeyError, TypeError, ValueError):
        return None
    return user_service.get_user_by_id(db, user_id)
