"""
Domain exceptions - Semantic error types for the user registry.

Every error carries an explicit ErrorKind discriminant so callers branch
on the kind of failure instead of on the identity of an error instance.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Closed set of failure kinds surfaced by the domain."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INTERNAL = "internal"


class UserRegistryError(Exception):
    """Base class for user registry domain errors."""

    kind: ErrorKind = ErrorKind.INTERNAL


class ValidationError(UserRegistryError):
    """Input is malformed or semantically invalid."""

    kind = ErrorKind.VALIDATION


class NotFoundError(UserRegistryError):
    """Referenced user does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = "User not found") -> None:
        super().__init__(message)


class ConflictError(UserRegistryError):
    """Email is already registered."""

    kind = ErrorKind.CONFLICT

    def __init__(self, message: str = "Email is already in use") -> None:
        super().__init__(message)


class InternalError(UserRegistryError):
    """Storage fault or other unexpected failure."""

    kind = ErrorKind.INTERNAL
