"""Services package."""
from src.services import (
    assignment_service,
    auth_service,
    group_service,
    module_service,
    permission_service,
    rbac_seed_service,
    rbac_service,
    role_service,
    user_service,
)

__all__ = [
    "assignment_service",
    "auth_service",
    "group_service",
    "module_service",
    "permission_service",
    "rbac_seed_service",
    "rbac_service",
    "role_service",
    "user_service",
]
