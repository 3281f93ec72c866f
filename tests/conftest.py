# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app
os.environ["SECRET_KEY"] = "test-secret-key-for-testing-only-32chars!"  # nosec - test-only secret  # noqa: S105
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["SEED_ON_STARTUP"] = "false"

from src.database import create_db_engine, create_session_factory, get_db
from src.main import app
from src.models import User
from src.models.base import Base
from src.security import get_password_hash
from src.services import user_service
from src.services.rbac_seed_service import seed_rbac_data

# Test database setup
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_db_engine(TEST_DATABASE_URL)
TestingSessionLocal = create_session_factory(engine)

ADMIN_PASSWORD = "adminpassword123"  # noqa: S105


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database for each test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session):
    """Factory creating persisted users outside of any group."""

    def _make_user(username: str, password: str = "Secret123!") -> User:
        user = User(
            username=username,
            email=f"{username}@example.com",
            password_hash=get_password_hash(password),
        )
        db_session.add(user)
        db_session.commit()
        db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def seeded_db(db_session):
    """Seed modules, permissions, Admin role, Administrators group and admin."""
    seed_rbac_data(
        db_session,
        admin_username="admin",
        admin_email="admin@example.com",
        admin_password=ADMIN_PASSWORD,
    )
    return db_session


@pytest.fixture
def admin_user(seeded_db) -> User:
    """The bootstrap admin created by the seeder."""
    return user_service.get_user_by_username(seeded_db, "admin")


def login(client, username: str, password: str) -> None:
    """Log in and attach the bearer token to the client."""
    response = client.post(
        "/api/v1/auth/login", json={"username": username, "password": password}
    )
    assert response.status_code == 200
    client.headers.update({"Authorization": f"Bearer {response.json()['token']}"})


@pytest.fixture
def admin_client(client, admin_user):
    """Create an authenticated admin test client."""
    login(client, "admin", ADMIN_PASSWORD)
    return client


@pytest.fixture
def authenticated_client(client, seeded_db, make_user):
    """Create a test client authenticated as a user without any group."""
    make_user("plainuser", "plainpassword")
    login(client, "plainuser", "plainpassword")
    return client


@pytest.fixture
def login_as(client):
    """Switch the test client to another user's identity."""

    def _login_as(username: str, password: str):
        login(client, username, password)
        return client

    return _login_as
