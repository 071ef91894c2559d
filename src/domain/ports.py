"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the domain requires
from infrastructure, and the interface the domain offers to the
transport layer. Adapters implement these protocols structurally.
"""

from typing import Protocol

from .user import RegisterParams, User


class UserStorage(Protocol):
    """Port interface for user persistence, keyed by email."""

    def get(self, email: str) -> User:
        """
        Fetch the user stored under an email.

        No format validation is performed on the email.

        Raises:
            NotFoundError: If no user is stored under the email
            InternalError: If the underlying store fails
        """
        ...

    def save(self, user: User) -> None:
        """
        Insert or overwrite the user stored under user.email.

        Does not check uniqueness - that is the caller's responsibility.

        Raises:
            InternalError: If the underlying store fails
        """
        ...

    def add(self, user: User) -> bool:
        """
        Atomically insert a user only if its email is not stored yet.

        Returns:
            True if the user was inserted, False if the email is taken

        Raises:
            InternalError: If the underlying store fails
        """
        ...


class UserService(Protocol):
    """Port interface for the registration use cases."""

    def register(self, params: RegisterParams) -> None:
        """
        Register a new user.

        Raises:
            ConflictError: If the email is already in use
            InternalError: If storage fails
        """
        ...

    def get_by_email(self, email: str) -> User:
        """
        Look up a registered user.

        Raises:
            NotFoundError: If no user is registered under the email
            InternalError: If storage fails
        """
        ...
