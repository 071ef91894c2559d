"""
Domain layer - Pure business logic with zero framework imports.

This package contains the user registry's entities, error taxonomy and
the registration service. It defines its own port interfaces so storage
and transport stay swappable.
"""

from .exceptions import (
    ConflictError,
    ErrorKind,
    InternalError,
    NotFoundError,
    UserRegistryError,
    ValidationError,
)
from .ports import UserService, UserStorage
from .registration import RegistrationService
from .user import RegisterParams, User

__all__ = [
    "ConflictError",
    "ErrorKind",
    "InternalError",
    "NotFoundError",
    "RegisterParams",
    "RegistrationService",
    "User",
    "UserRegistryError",
    "UserService",
    "UserStorage",
    "ValidationError",
]
