# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for permission resolution."""

import random

import pytest

from src.exceptions import ForbiddenError
from src.models import CoreModule, PermissionAction
from src.schemas.group import GroupCreate
from src.schemas.module import ModuleCreate
from src.schemas.role import RoleCreate
from src.services import (
    assignment_service,
    group_service,
    module_service,
    rbac_service,
    role_service,
)


@pytest.fixture
def biller_setup(db_session, make_user):
    """alice -> Finance -> Biller -> {read, create} on Billing."""
    alice = make_user("alice")
    billing = module_service.create_module(db_session, ModuleCreate(name="Billing"))
    role = role_service.create_role(db_session, RoleCreate(name="Biller"))
    group = group_service.create_group(db_session, GroupCreate(name="Finance"))
    assignment_service.add_permissions_to_role(
        db_session,
        role.id,
        [p.id for p in billing.permissions if p.action in ("read", "create")],
    )
    assignment_service.add_roles_to_group(db_session, group.id, [role.id])
    assignment_service.add_users_to_group(db_session, group.id, [alice.id])
    return {"user": alice, "module": billing, "role": role, "group": group}


def test_has_permission_follows_the_chain(db_session, biller_setup):
    alice = biller_setup["user"]

    assert rbac_service.has_permission(db_session, alice.id, "Billing", "read")
    assert rbac_service.has_permission(
        db_session, alice.id, "Billing", PermissionAction.CREATE
    )
    assert not rbac_service.has_permission(db_session, alice.id, "Billing", "delete")


def test_module_name_match_is_case_sensitive(db_session, biller_setup):
    alice = biller_setup["user"]

    assert not rbac_service.has_permission(db_session, alice.id, "billing", "read")


def test_unknown_user_or_module_is_denied(db_session, biller_setup):
    alice = biller_setup["user"]

    assert not rbac_service.has_permission(db_session, 9999, "Billing", "read")
    assert not rbac_service.has_permission(db_session, alice.id, "Payroll", "read")


def test_removing_membership_revokes(db_session, biller_setup):
    alice = biller_setup["user"]
    assignment_service.remove_users_from_group(
        db_session, biller_setup["group"].id, [alice.id]
    )

    assert not rbac_service.has_permission(db_session, alice.id, "Billing", "read")
    assert rbac_service.get_permission_map(db_session, alice.id) == {}


def test_removing_role_from_group_revokes(db_session, biller_setup):
    alice = biller_setup["user"]
    assignment_service.remove_roles_from_group(
        db_session, biller_setup["group"].id, [biller_setup["role"].id]
    )

    assert not rbac_service.has_permission(db_session, alice.id, "Billing", "read")


def test_check_permission_raises_forbidden(db_session, biller_setup):
    alice = biller_setup["user"]

    rbac_service.check_permission(db_session, alice.id, "Billing", "read")
    with pytest.raises(ForbiddenError):
        rbac_service.check_permission(
            db_session, alice.id, CoreModule.USERS, PermissionAction.READ
        )


def test_permission_map(db_session, biller_setup):
    alice = biller_setup["user"]

    assert rbac_service.get_permission_map(db_session, alice.id) == {
        "Billing": {"read", "create"}
    }


def test_permission_map_deduplicates_multiple_paths(db_session, biller_setup):
    alice = biller_setup["user"]
    second = group_service.create_group(db_session, GroupCreate(name="Auditors"))
    assignment_service.add_roles_to_group(
        db_session, second.id, [biller_setup["role"].id]
    )
    assignment_service.add_users_to_group(db_session, second.id, [alice.id])

    assert rbac_service.get_permission_map(db_session, alice.id) == {
        "Billing": {"read", "create"}
    }
    paths = rbac_service.get_grant_paths(db_session, alice.id, "Billing", "read")
    assert [(p.group, p.role) for p in paths] == [
        ("Auditors", "Biller"),
        ("Finance", "Biller"),
    ]


def test_seeded_admin_holds_every_core_permission(seeded_db, admin_user):
    permissions = rbac_service.get_permission_map(seeded_db, admin_user.id)

    assert set(permissions) == {module.value for module in CoreModule}
    for actions in permissions.values():
        assert actions == {action.value for action in PermissionAction}


def test_simulate_allowed(db_session, biller_setup):
    alice = biller_setup["user"]

    result = rbac_service.simulate_action(db_session, alice.id, "Billing", "create")

    assert result.has_permission is True
    assert result.message == "User can create on Billing"
    assert [(p.group, p.role) for p in result.granted_via] == [("Finance", "Biller")]


def test_simulate_denied_reads_the_same_for_unknown_user(db_session, biller_setup):
    alice = biller_setup["user"]

    denied = rbac_service.simulate_action(db_session, alice.id, "Billing", "delete")
    unknown = rbac_service.simulate_action(db_session, 9999, "Billing", "delete")

    assert denied.has_permission is False
    assert denied.granted_via == []
    assert denied.message == unknown.message == "User cannot delete on Billing"


@pytest.mark.parametrize("seed", [1, 7, 42])
def test_permission_map_matches_graph_union(db_session, make_user, seed):
    """Resolution equals the union over every group -> role -> permission path."""
    rng = random.Random(seed)
    users = [make_user(f"user{i}") for i in range(4)]
    modules = [
        module_service.create_module(db_session, ModuleCreate(name=f"Module{i}"))
        for i in range(3)
    ]
    permissions = [p for module in modules for p in module.permissions]
    module_names = {module.id: module.name for module in modules}
    roles = [
        role_service.create_role(db_session, RoleCreate(name=f"Role{i}"))
        for i in range(4)
    ]
    groups = [
        group_service.create_group(db_session, GroupCreate(name=f"Group{i}"))
        for i in range(3)
    ]

    role_grants = {}
    for role in roles:
        chosen = rng.sample(permissions, rng.randint(0, 6))
        role_grants[role.id] = {(module_names[p.module_id], p.action) for p in chosen}
        if chosen:
            assignment_service.add_permissions_to_role(
                db_session, role.id, [p.id for p in chosen]
            )

    group_roles = {}
    for group in groups:
        chosen = rng.sample(roles, rng.randint(0, 2))
        group_roles[group.id] = [role.id for role in chosen]
        if chosen:
            assignment_service.add_roles_to_group(
                db_session, group.id, group_roles[group.id]
            )

    expected = {}
    for user in users:
        memberships = rng.sample(groups, rng.randint(0, 2))
        for group in memberships:
            assignment_service.add_users_to_group(db_session, group.id, [user.id])

        granted = set()
        for group in memberships:
            for role_id in group_roles[group.id]:
                granted |= role_grants[role_id]
        expected[user.id] = granted

    for user in users:
        actual = rbac_service.get_permission_map(db_session, user.id)
        flattened = {
            (module, action) for module, actions in actual.items() for action in actions
        }
        assert flattened == expected[user.id]
        for module, action in expected[user.id]:
            assert rbac_service.has_permission(db_session, user.id, module, action)
