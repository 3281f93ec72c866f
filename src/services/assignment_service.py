# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Bulk link and unlink operations for the many-to-many relations.

Every call is a single transaction. The owner row is locked first so that
concurrent calls on the same owner serialize; the later commit wins and no
caller observes a half-applied change.

``link`` is an idempotent set-union: the given pairs are cleared and then
re-inserted, so retrying a call never trips a duplicate-key error. ``unlink``
is a set-difference that reports how many pairs were actually removed.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from sqlalchemy import delete, insert
from sqlalchemy.orm import InstrumentedAttribute, Session

from src.database import transaction
from src.exceptions import NotFoundError
from src.models import (
    Group,
    GroupRole,
    Permission,
    Role,
    RolePermission,
    User,
    UserGroup,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Relation:
    """Describes one owner-to-counterpart association table."""

    owner_model: type
    counterpart_model: type
    association: type
    owner_key: InstrumentedAttribute
    counterpart_key: InstrumentedAttribute
    owner_label: str
    counterpart_label: str


GROUP_USERS = Relation(
    owner_model=Group,
    counterpart_model=User,
    association=UserGroup,
    owner_key=UserGroup.group_id,
    counterpart_key=UserGroup.user_id,
    owner_label="Group",
    counterpart_label="users",
)

GROUP_ROLES = Relation(
    owner_model=Group,
    counterpart_model=Role,
    association=GroupRole,
    owner_key=GroupRole.group_id,
    counterpart_key=GroupRole.role_id,
    owner_label="Group",
    counterpart_label="roles",
)

ROLE_PERMISSIONS = Relation(
    owner_model=Role,
    counterpart_model=Permission,
    association=RolePermission,
    owner_key=RolePermission.role_id,
    counterpart_key=RolePermission.permission_id,
    owner_label="Role",
    counterpart_label="permissions",
)


def _lock_owner(db: Session, relation: Relation, owner_id: int) -> None:
    model = relation.owner_model
    owner = db.query(model.id).filter(model.id == owner_id).with_for_update().first()
    if not owner:
        raise NotFoundError(f"{relation.owner_label} not found")


def _ensure_counterparts_exist(
    db: Session, relation: Relation, counterpart_ids: set[int]
) -> None:
    model = relation.counterpart_model
    found = {
        row_id
        for (row_id,) in db.query(model.id).filter(model.id.in_(counterpart_ids)).all()
    }
    missing = counterpart_ids - found
    if missing:
        logger.debug(
            f"Rejected {relation.counterpart_label} change, unknown ids: {sorted(missing)}"
        )
        raise NotFoundError(f"One or more {relation.counterpart_label} not found")


def link(
    db: Session, relation: Relation, owner_id: int, counterpart_ids: Iterable[int]
) -> int:
    """Link every counterpart to the owner. Returns the number of links ensured.

    Nothing is written unless the owner and every counterpart exist.
    """
    ids = set(counterpart_ids)
    with transaction(db):
        _lock_owner(db, relation, owner_id)
        if not ids:
            return 0
        _ensure_counterparts_exist(db, relation, ids)

        owner_column = relation.owner_key.key
        counterpart_column = relation.counterpart_key.key
        db.execute(
            delete(relation.association)
            .where(
                relation.owner_key == owner_id,
                relation.counterpart_key.in_(ids),
            )
            .execution_options(synchronize_session=False)
        )
        db.execute(
            insert(relation.association),
            [
                {owner_column: owner_id, counterpart_column: counterpart_id}
                for counterpart_id in sorted(ids)
            ],
        )
    db.expire_all()
    return len(ids)


def unlink(
    db: Session, relation: Relation, owner_id: int, counterpart_ids: Iterable[int]
) -> int:
    """Remove the given counterparts from the owner.

    Pairs that are not linked are ignored. Returns the number of links
    actually removed, which may be zero.
    """
    ids = set(counterpart_ids)
    with transaction(db):
        _lock_owner(db, relation, owner_id)
        if not ids:
            return 0
        _ensure_counterparts_exist(db, relation, ids)

        result = db.execute(
            delete(relation.association)
            .where(
                relation.owner_key == owner_id,
                relation.counterpart_key.in_(ids),
            )
            .execution_options(synchronize_session=False)
        )
        removed = result.rowcount
    db.expire_all()
    return removed


def add_users_to_group(db: Session, group_id: int, user_ids: Iterable[int]) -> int:
    """Make the given users members of a group."""
    return link(db, GROUP_USERS, group_id, user_ids)


def remove_users_from_group(
    db: Session, group_id: int, user_ids: Iterable[int]
) -> int:
    """Remove the given users from a group."""
    return unlink(db, GROUP_USERS, group_id, user_ids)


def add_roles_to_group(db: Session, group_id: int, role_ids: Iterable[int]) -> int:
    """Grant the given roles to a group."""
    return link(db, GROUP_ROLES, group_id, role_ids)


def remove_roles_from_group(
    db: Session, group_id: int, role_ids: Iterable[int]
) -> int:
    """Revoke the given roles from a group."""
    return unlink(db, GROUP_ROLES, group_id, role_ids)


def add_permissions_to_role(
    db: Session, role_id: int, permission_ids: Iterable[int]
) -> int:
    """Add the given permissions to a role."""
    return link(db, ROLE_PERMISSIONS, role_id, permission_ids)


def remove_permissions_from_role(
    db: Session, role_id: int, permission_ids: Iterable[int]
) -> int:
    """Remove the given permissions from a role."""
    return unlink(db, ROLE_PERMISSIONS, role_id, permission_ids)
