# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for auth_service."""

import pytest

from src.config import Settings
from src.exceptions import ConflictError
from src.schemas.auth import RegisterRequest
from src.services import auth_service, rbac_service


def test_register_user_has_no_groups_and_no_permissions(db_session):
    request = RegisterRequest(
        username="newcomer", email="newcomer@example.com", password="secret1"
    )

    user = auth_service.register_user(db_session, request)

    assert user.id is not None
    assert user.groups == []
    assert rbac_service.get_permission_map(db_session, user.id) == {}


def test_register_user_rejects_duplicate_username(db_session, make_user):
    make_user("taken")
    request = RegisterRequest(
        username="taken", email="other@example.com", password="secret1"
    )

    with pytest.raises(ConflictError):
        auth_service.register_user(db_session, request)


def test_authenticate_success_and_failures(db_session, make_user):
    user = make_user("authuser", "Secret123!")
    assert auth_service.authenticate(db_session, "authuser", "Secret123!") == user
    assert auth_service.authenticate(db_session, "authuser", "wrong") is None
    assert auth_service.authenticate(db_session, "nouser", "Secret123!") is None



@pytest.fixture
def token_settings():
    return Settings(secret_key="auth-service-test-secret-32-chars!")  # noqa: S106


def test_token_round_trip_resolves_user(db_session, make_user, token_settings):
    user = make_user("tokenuser")
    token = auth_service.issue_token(user, token_settings)

    assert auth_service.get_user_from_token(db_session, token, token_settings) == user


def test_token_from_other_app_secret_is_rejected(
    db_session, make_user, token_settings
):
    user = make_user("tokenuser")
    token = auth_service.issue_token(user, token_settings)
    other = Settings(secret_key="a-different-deployment-secret-32c")  # noqa: S106

    assert auth_service.get_user_from_token(db_session, token, other) is None


def test_invalid_token_resolves_to_none(db_session, token_settings):
    assert (
        auth_service.get_user_from_token(db_session, "not-a-token", token_settings)
        is None
    )


def test_token_for_deleted_user_resolves_to_none(db_session, make_user, token_settings):
    user = make_user("ghost")
    token = auth_service.issue_token(user, token_settings)
    db_session.delete(user)
    db_session.commit()

    assert auth_service.get_user_from_token(db_session, token, token_settings) is None
