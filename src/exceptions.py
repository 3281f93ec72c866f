# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Domain exceptions."""


class RBACError(Exception):
    """Base exception for the access control core."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(RBACError):
    """Referenced entity or relation does not exist."""

    status_code = 404


class ConflictError(RBACError):
    """A uniqueness constraint would be violated."""

    status_code = 409


class ForbiddenError(RBACError):
    """The caller lacks the permission required for the operation."""

    status_code = 403


class InvalidInputError(RBACError):
    """Request data is malformed or empty."""

    status_code = 400


class SelfDeletionError(RBACError):
    """A user attempted to delete their own account."""

    status_code = 400


class SeedError(RBACError):
    """Bootstrap seeding failed; the process must not start."""
