# src/rbac/roles.py
# The Admin role is linked to every permission that exists at seed time,
# the Administrators group holds the Admin role, and the bootstrap admin
# user is placed in the Administrators group.
ADMIN_ROLE = {
    "name": "Admin",
    "description": "Full system administrator",
}

ADMIN_GROUP = {
    "name": "Administrators",
    "description": "System administrators group",
}
