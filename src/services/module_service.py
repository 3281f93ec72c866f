# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Module management service.

Creating a module also creates its four canonical permissions in the same
transaction. Deleting a module deletes those permissions, which in turn
revokes them from every role.
"""

import logging

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from src.database import transaction
from src.exceptions import ConflictError, InvalidInputError, NotFoundError
from src.models import CoreModule, Module, Permission
from src.rbac.permissions import CANONICAL_ACTIONS
from src.schemas.module import ModuleCreate, ModuleResponse, ModuleUpdate

logger = logging.getLogger(__name__)

CORE_MODULE_NAMES = frozenset(module.value for module in CoreModule)


def get_module_by_name(db: Session, name: str) -> Module | None:
    """Get a module by its exact, case-sensitive name."""
    return db.query(Module).filter(Module.name == name).first()


def get_module(db: Session, module_id: int) -> Module:
    """Get a module with its permissions, raising NotFoundError if absent."""
    module = (
        db.query(Module)
        .options(selectinload(Module.permissions))
        .filter(Module.id == module_id)
        .first()
    )
    if not module:
        raise NotFoundError("Module not found")
    return module


def get_modules(db: Session) -> list[ModuleResponse]:
    """List all modules ordered by name with their permission counts."""
    rows = (
        db.query(Module, func.count(Permission.id))
        .outerjoin(Permission, Permission.module_id == Module.id)
        .group_by(Module.id)
        .order_by(Module.name)
        .all()
    )
    return [
        ModuleResponse(
            id=module.id,
            name=module.name,
            description=module.description,
            created_at=module.created_at,
            permission_count=permission_count,
        )
        for module, permission_count in rows
    ]


def add_module(db: Session, name: str, description: str | None = None) -> Module:
    """Stage a module and its canonical permissions without committing."""
    if get_module_by_name(db, name):
        raise ConflictError("Module name already exists")

    module = Module(name=name, description=description)
    module.permissions = [Permission(action=action) for action in CANONICAL_ACTIONS]
    db.add(module)
    db.flush()
    return module


def create_module(db: Session, data: ModuleCreate) -> Module:
    """Create a module together with its default permissions."""
    with transaction(db):
        module = add_module(db, data.name, data.description)
    db.refresh(module)
    logger.info(f"Created module {module.name} with default permissions")
    return module


def _is_core_module(module: Module) -> bool:
    return module.name in CORE_MODULE_NAMES


def update_module(db: Session, module_id: int, data: ModuleUpdate) -> Module:
    """Rename a module and/or change its description.

    Built-in modules keep their names; only their description can change.
    """
    with transaction(db):
        module = db.query(Module).filter(Module.id == module_id).first()
        if not module:
            raise NotFoundError("Module not found")

        if data.name is not None and data.name != module.name:
            if _is_core_module(module):
                raise InvalidInputError("Built-in modules cannot be renamed")
            existing = get_module_by_name(db, data.name)
            if existing and existing.id != module_id:
                raise ConflictError("Module name already exists")
            module.name = data.name

        if data.description is not None:
            module.description = data.description
    db.refresh(module)
    return module


def delete_module(db: Session, module_id: int) -> None:
    """Delete a module and every permission scoped to it."""
    with transaction(db):
        module = db.query(Module).filter(Module.id == module_id).first()
        if not module:
            raise NotFoundError("Module not found")
        if _is_core_module(module):
            raise InvalidInputError("Built-in modules cannot be deleted")
        db.delete(module)
    logger.info(f"Deleted module id={module_id}")
