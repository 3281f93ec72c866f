# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for application startup: schema creation and bootstrap seeding."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest
from fastapi.testclient import TestClient

from src import main
from src.config import Settings
from src.exceptions import SeedError


@pytest.fixture
def app_settings(tmp_path):
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'startup.db'}",
        admin_username="root",
        admin_email="root@example.com",
        admin_password="rootpassword",
        seed_on_startup=True,
    )


def test_startup_seeds_and_serves(app_settings):
    app = main.create_app(app_settings)

    with TestClient(app) as client:
        response = client.post(
            "/api/v1/auth/login",
            json={"username": "root", "password": "rootpassword"},
        )
        assert response.status_code == 200
        token = response.json()["token"]

        response = client.get(
            "/api/v1/modules", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 200
        assert len(response.json()) == 5


def test_restart_does_not_reseed(app_settings):
    with TestClient(main.create_app(app_settings)):
        pass

    with TestClient(main.create_app(app_settings)) as client:
        response = client.post(
            "/api/v1/auth/login",
            json={"username": "root", "password": "rootpassword"},
        )
        token = response.json()["token"]
        response = client.get(
            "/api/v1/users", headers={"Authorization": f"Bearer {token}"}
        )
        assert [u["username"] for u in response.json()] == ["root"]


def test_seed_failure_aborts_startup(app_settings, monkeypatch):
    def failing_seed(db, **kwargs):
        raise SeedError("Bootstrap seeding failed: disk full")

    monkeypatch.setattr(main, "seed_rbac_data", failing_seed)

    with pytest.raises(SeedError):
        with TestClient(main.create_app(app_settings)):
            pass


def test_startup_without_seeding(app_settings):
    app_settings.seed_on_startup = False

    with TestClient(main.create_app(app_settings)) as client:
        response = client.post(
            "/api/v1/auth/login",
            json={"username": "root", "password": "rootpassword"},
        )
        assert response.status_code == 401


def test_tokens_use_the_app_settings(app_settings):
    app_settings.secret_key = "per-app-signing-secret-of-32-chars"  # noqa: S105
    app_settings.access_token_expire_minutes = 1
    before = datetime.now(UTC)

    with TestClient(main.create_app(app_settings)) as client:
        response = client.post(
            "/api/v1/auth/login",
            json={"username": "root", "password": "rootpassword"},
        )
        token = response.json()["token"]

        claims = jwt.decode(
            token, app_settings.secret_key, algorithms=[app_settings.jwt_algorithm]
        )
        expires_at = datetime.fromtimestamp(claims["exp"], UTC)
        assert expires_at <= before + timedelta(minutes=1, seconds=5)

        response = client.get(
            "/api/v1/me/permissions", headers={"Authorization": f"Bearer {token}"}
        )
        assert response.status_code == 200


def test_token_signed_with_another_secret_is_rejected(app_settings):
    forged = jwt.encode(
        {"sub": "1", "exp": datetime.now(UTC) + timedelta(minutes=5)},
        "some-other-deployment-secret-32ch",
        algorithm="HS256",
    )

    with TestClient(main.create_app(app_settings)) as client:
        response = client.get(
            "/api/v1/me/permissions", headers={"Authorization": f"Bearer {forged}"}
        )
        assert response.status_code == 401
