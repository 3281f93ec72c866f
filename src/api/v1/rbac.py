# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Permission introspection and simulation endpoints.

Both are open to any authenticated user and are not gated by a module
permission themselves.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from src.api.deps import get_current_user, get_db
from src.models import User
from src.schemas.common import UserSummary
from src.schemas.rbac import (
    SimulateActionRequest,
    SimulateActionResponse,
    UserPermissionsSchema,
)
from src.services import rbac_service

router = APIRouter()


@router.get(
    "/me/permissions",
    response_model=UserPermissionsSchema,
    summary="Get current user's effective permissions",
)
def get_my_permissions(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> UserPermissionsSchema:
    """Retrieve the actions the current user may perform, keyed by module."""
    permission_map = rbac_service.get_permission_map(db, current_user.id)
    return UserPermissionsSchema(
        user=UserSummary.model_validate(current_user),
        permissions={
            module: sorted(actions) for module, actions in sorted(permission_map.items())
        },
    )


@router.post(
    "/simulate-action",
    response_model=SimulateActionResponse,
    summary="Test whether a user could perform an action",
)
def simulate_action(
    body: SimulateActionRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> SimulateActionResponse:
    """Report whether a user holds a permission and through which group and role."""
    return rbac_service.simulate_action(db, body.user_id, body.module, body.action)
