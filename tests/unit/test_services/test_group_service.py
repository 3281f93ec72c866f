# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for group_service."""

import pytest

from src.exceptions import ConflictError, NotFoundError
from src.models import GroupRole, User, UserGroup
from src.schemas.group import GroupCreate, GroupUpdate
from src.schemas.role import RoleCreate
from src.services import assignment_service, group_service, role_service


def test_create_group(db_session):
    group = group_service.create_group(
        db_session, GroupCreate(name="Finance", description="Money people")
    )

    assert group.id is not None
    assert group.users == []
    assert group.roles == []


def test_create_group_duplicate_name(db_session):
    group_service.create_group(db_session, GroupCreate(name="Finance"))

    with pytest.raises(ConflictError):
        group_service.create_group(db_session, GroupCreate(name="Finance"))


def test_get_groups_reports_counts(db_session, make_user):
    alice = make_user("alice")
    bob = make_user("bob")
    finance = group_service.create_group(db_session, GroupCreate(name="Finance"))
    group_service.create_group(db_session, GroupCreate(name="Audit"))
    role = role_service.create_role(db_session, RoleCreate(name="Biller"))
    assignment_service.add_users_to_group(db_session, finance.id, [alice.id, bob.id])
    assignment_service.add_roles_to_group(db_session, finance.id, [role.id])

    groups = group_service.get_groups(db_session)

    assert [g.name for g in groups] == ["Audit", "Finance"]
    assert (groups[0].user_count, groups[0].role_count) == (0, 0)
    assert (groups[1].user_count, groups[1].role_count) == (2, 1)


def test_update_group(db_session):
    group = group_service.create_group(db_session, GroupCreate(name="Finance"))
    group_service.create_group(db_session, GroupCreate(name="Audit"))

    updated = group_service.update_group(
        db_session, group.id, GroupUpdate(description="Accounts")
    )
    assert updated.name == "Finance"
    assert updated.description == "Accounts"

    with pytest.raises(ConflictError):
        group_service.update_group(db_session, group.id, GroupUpdate(name="Audit"))
    with pytest.raises(NotFoundError):
        group_service.update_group(db_session, 999, GroupUpdate(name="Other"))


def test_delete_group_removes_links_but_keeps_users_and_roles(db_session, make_user):
    alice = make_user("alice")
    group = group_service.create_group(db_session, GroupCreate(name="Finance"))
    role = role_service.create_role(db_session, RoleCreate(name="Biller"))
    assignment_service.add_users_to_group(db_session, group.id, [alice.id])
    assignment_service.add_roles_to_group(db_session, group.id, [role.id])

    group_service.delete_group(db_session, group.id)

    assert group_service.get_group_by_name(db_session, "Finance") is None
    assert db_session.query(UserGroup).count() == 0
    assert db_session.query(GroupRole).count() == 0
    assert db_session.query(User).count() == 1
    assert role_service.get_role(db_session, role.id).groups == []


def test_delete_group_missing(db_session):
    with pytest.raises(NotFoundError):
        group_service.delete_group(db_session, 42)
