"""Pydantic schemas package."""
from src.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from src.schemas.common import (
    AssignmentResponse,
    GroupSummary,
    HealthResponse,
    MessageResponse,
    RemovalResponse,
    RoleSummary,
    UserSummary,
)
from src.schemas.group import (
    GroupCreate,
    GroupDetailResponse,
    GroupResponse,
    GroupRolesRequest,
    GroupUpdate,
    GroupUsersRequest,
)
from src.schemas.module import (
    ModuleCreate,
    ModuleDetailResponse,
    ModuleResponse,
    ModuleUpdate,
)
from src.schemas.permission import (
    ModulePermissionGroup,
    PermissionCreate,
    PermissionDetailResponse,
    PermissionResponse,
    PermissionUpdate,
)
from src.schemas.rbac import (
    SimulateActionRequest,
    SimulateActionResponse,
    UserPermissionsSchema,
)
from src.schemas.role import (
    RoleCreate,
    RoleDetailResponse,
    RolePermissionsRequest,
    RoleResponse,
    RoleUpdate,
)
from src.schemas.user import (
    UserCreate,
    UserDetailResponse,
    UserResponse,
    UserUpdate,
)

__all__ = [
    "AssignmentResponse",
    "AuthResponse",
    "GroupCreate",
    "GroupDetailResponse",
    "GroupResponse",
    "GroupRolesRequest",
    "GroupSummary",
    "GroupUpdate",
    "GroupUsersRequest",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "ModuleCreate",
    "ModuleDetailResponse",
    "ModulePermissionGroup",
    "ModuleResponse",
    "ModuleUpdate",
    "PermissionCreate",
    "PermissionDetailResponse",
    "PermissionResponse",
    "PermissionUpdate",
    "RegisterRequest",
    "RemovalResponse",
    "RoleCreate",
    "RoleDetailResponse",
    "RolePermissionsRequest",
    "RoleResponse",
    "RoleSummary",
    "RoleUpdate",
    "SimulateActionRequest",
    "SimulateActionResponse",
    "UserCreate",
    "UserDetailResponse",
    "UserPermissionsSchema",
    "UserResponse",
    "UserSummary",
    "UserUpdate",
]
