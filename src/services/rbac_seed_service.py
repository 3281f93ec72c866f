# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import logging

from sqlalchemy.orm import Session

from src.config import DEFAULT_ADMIN_PASSWORD
from src.exceptions import SeedError
from src.models import Group, Module, Permission, Role, User
from src.rbac.permissions import DEFAULT_MODULES
from src.rbac.roles import ADMIN_GROUP, ADMIN_ROLE
from src.security import get_password_hash

from . import module_service

logger = logging.getLogger(__name__)


def is_seeded(db: Session) -> bool:
    """Check whether the store already holds modules or users."""
    return (
        db.query(Module.id).first() is not None
        or db.query(User.id).first() is not None
    )


def seed_rbac_data(
    db: Session,
    admin_username: str,
    admin_email: str,
    admin_password: str,
) -> bool:
    """Seed the default modules, permissions, Admin role, group and user.

    Everything is written in one transaction: either the whole seed is
    committed or nothing is. A store that already holds data is left
    untouched. Returns True if seeding happened.
    @param db: SQLAlchemy Session object
    """
    if is_seeded(db):
        logger.info("Store already initialized, skipping seed")
        return False

    if admin_password == DEFAULT_ADMIN_PASSWORD:
        logger.warning(
            "Seeding admin account with the default password; "
            "set ADMIN_PASSWORD and change it after first login"
        )

    try:
        # Modules, each with its four canonical permissions
        for module_data in DEFAULT_MODULES:
            module_service.add_module(db, **module_data)

        permissions = db.query(Permission).order_by(Permission.id).all()

        admin_role = Role(**ADMIN_ROLE)
        admin_role.permissions = permissions
        db.add(admin_role)

        admin_group = Group(**ADMIN_GROUP)
        admin_group.roles = [admin_role]
        db.add(admin_group)

        admin_user = User(
            username=admin_username,
            email=admin_email,
            password_hash=get_password_hash(admin_password),
        )
        admin_user.groups = [admin_group]
        db.add(admin_user)

        db.commit()
    except Exception as e:
        db.rollback()
        logger.error(f"Seeding failed, nothing was written: {e}")
        raise SeedError(f"Bootstrap seeding failed: {e}") from e

    logger.info(
        f"Seeded {len(DEFAULT_MODULES)} modules, {len(permissions)} permissions "
        f"and admin account '{admin_username}'"
    )
    return True
