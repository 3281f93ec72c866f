# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Module management API endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, require_permission
from src.models import CoreModule, PermissionAction, User
from src.schemas.common import MessageResponse
from src.schemas.module import (
    ModuleCreate,
    ModuleDetailResponse,
    ModuleResponse,
    ModuleUpdate,
)
from src.services import module_service

router = APIRouter()


@router.get("/modules", response_model=list[ModuleResponse], summary="List all modules")
def list_modules(
    db: Session = Depends(get_db),
    current_user: User = Depends(
        require_permission(CoreModule.MODULES, PermissionAction.READ)
    ),
) -> list[ModuleResponse]:
    """Retrieve all modules with their permission counts."""
    return module_service.get_modules(db)


@router.get(
    "/modules/{module_id}",
    response_model=ModuleDetailResponse,
    summary="Get a module with its permissions",
)
def get_module(
    module_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(
        require_permission(CoreModule.MODULES, PermissionAction.READ)
    ),
) -> ModuleDetailResponse:
    """Retrieve a module including its permissions."""
    return ModuleDetailResponse.model_validate(module_service.get_module(db, module_id))


@router.post(
    "/modules",
    response_model=ModuleDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new module",
)
def create_module(
    module_in: ModuleCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(
        require_permission(CoreModule.MODULES, PermissionAction.CREATE)
    ),
) -> ModuleDetailResponse:
    """Create a module along with its create/read/update/delete permissions."""
    module = module_service.create_module(db, module_in)
    return ModuleDetailResponse.model_validate(module_service.get_module(db, module.id))


@router.put(
    "/modules/{module_id}",
    response_model=ModuleDetailResponse,
    summary="Update a module",
)
def update_module(
    module_id: int,
    module_in: ModuleUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(
        require_permission(CoreModule.MODULES, PermissionAction.UPDATE)
    ),
) -> ModuleDetailResponse:
    """Update a module's name or description."""
    module_service.update_module(db, module_id, module_in)
    return ModuleDetailResponse.model_validate(module_service.get_module(db, module_id))


@router.delete(
    "/modules/{module_id}", response_model=MessageResponse, summary="Delete a module"
)
def delete_module(
    module_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(
        require_permission(CoreModule.MODULES, PermissionAction.DELETE)
    ),
) -> MessageResponse:
    """Delete a module together with all of its permissions."""
    module_service.delete_module(db, module_id)
    return MessageResponse(message="Module deleted successfully")
