"""
Registration domain service - Email uniqueness enforcement.

This module contains the business rule of the user registry: an email
address identifies at most one user.

Registration Flow
=================

1. Look the email up in storage.
2. Found -> ConflictError.
3. Any failure other than NotFoundError -> InternalError.
4. Not found -> insert with the storage's atomic insert-if-absent.
   If another registration for the same email won in between,
   the insert reports it and the request fails with ConflictError.

Step 4 makes the rule hold under concurrent registrations: exactly one
request per email is persisted no matter how the lookups interleave.
"""

import logging
from dataclasses import dataclass

from .exceptions import ConflictError, ErrorKind, InternalError, UserRegistryError
from .ports import UserStorage
from .user import RegisterParams, User

logger = logging.getLogger(__name__)


@dataclass
class RegistrationService:
    """
    Domain service for user registration and lookup.

    Holds no state of its own; all records live in the injected storage.
    """

    storage: UserStorage

    def register(self, params: RegisterParams) -> None:
        """
        Register a new user under params.email.

        Args:
            params: Syntactically valid registration input

        Raises:
            ConflictError: If the email is already in use
            InternalError: If storage fails
        """
        try:
            self.storage.get(params.email)
        except UserRegistryError as exc:
            if exc.kind is ErrorKind.INTERNAL:
                raise
            if exc.kind is not ErrorKind.NOT_FOUND:
                raise InternalError(str(exc)) from exc
        except Exception as exc:
            raise _internal(exc) from exc
        else:
            logger.info("Registration rejected, email in use: %s", params.email)
            raise ConflictError()

        try:
            inserted = self.storage.add(params.to_user())
        except InternalError:
            raise
        except Exception as exc:
            raise _internal(exc) from exc

        if not inserted:
            logger.info("Registration lost race for email: %s", params.email)
            raise ConflictError()

        logger.info("Registered user: %s", params.email)

    def get_by_email(self, email: str) -> User:
        """
        Look up a registered user.

        NotFoundError and InternalError from storage propagate unchanged.
        """
        try:
            return self.storage.get(email)
        except UserRegistryError:
            raise
        except Exception as exc:
            raise _internal(exc) from exc


def _internal(exc: Exception) -> InternalError:
    """Wrap an unexpected adapter exception."""
    return InternalError(str(exc) or exc.__class__.__name__)
