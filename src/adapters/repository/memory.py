"""
In-memory repository adapter - Implements UserStorage protocol.

This module provides a process-local implementation of the domain's
storage port. Records live for the lifetime of the adapter instance.

Concurrency:
------------
A single lock guards the map, so get, save and add are each atomic.
add() is the insert-if-absent primitive the registration service relies
on to keep one record per email under concurrent registrations.
"""

import logging
import threading

from src.domain.exceptions import NotFoundError
from src.domain.user import User

logger = logging.getLogger(__name__)


class InMemoryUserStorage:
    """
    Implements UserStorage protocol with a lock-guarded dict.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self._users: dict[str, User] = {}
        self._lock = threading.Lock()

    def get(self, email: str) -> User:
        """
        Fetch the user stored under an email.

        Raises:
            NotFoundError: If no user is stored under the email
        """
        with self._lock:
            user = self._users.get(email)
        if user is None:
            raise NotFoundError()
        return user

    def save(self, user: User) -> None:
        """Insert or overwrite the user stored under user.email."""
        with self._lock:
            self._users[user.email] = user

    def add(self, user: User) -> bool:
        """
        Insert the user only if its email is not stored yet.

        Returns:
            True if inserted, False if the email was already taken
        """
        with self._lock:
            if user.email in self._users:
                return False
            self._users[user.email] = user
        logger.debug("Stored user: %s", user.email)
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)
