# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from src.api.v1 import auth, groups, modules, permissions, rbac, roles, users

api_router = APIRouter()

# Auth routes
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# Entity management routes
api_router.include_router(users.router, tags=["users"])
api_router.include_router(groups.router, tags=["groups"])
api_router.include_router(roles.router, tags=["roles"])
api_router.include_router(modules.router, tags=["modules"])
api_router.include_router(permissions.router, tags=["permissions"])

# Introspection routes
api_router.include_router(rbac.router, tags=["rbac"])
