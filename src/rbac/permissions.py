# src/rbac/permissions.py
from src.models.enums import CoreModule, PermissionAction

# Every module gets exactly one permission per canonical action
CANONICAL_ACTIONS = [action.value for action in PermissionAction]

# Modules seeded on first run; they guard the console's own endpoints
DEFAULT_MODULES = [
    {"name": CoreModule.USERS.value, "description": "User management module"},
    {"name": CoreModule.GROUPS.value, "description": "Group management module"},
    {"name": CoreModule.ROLES.value, "description": "Role management module"},
    {"name": CoreModule.MODULES.value, "description": "Module management"},
    {"name": CoreModule.PERMISSIONS.value, "description": "Permission management"},
]
