"""
Shared fixtures for adversarial tests.

Provides common test infrastructure for race condition tests.
"""

import threading
from collections.abc import Callable

import pytest

from src.adapters.repository.memory import InMemoryUserStorage
from src.domain.user import User

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial


class InterleavingStorage(InMemoryUserStorage):
    """
    Storage that holds the first N get() calls at a barrier.

    Forces N concurrent registrations to pass the lookup step together,
    which is the widest possible check-then-act window. Later lookups
    run straight through.
    """

    def __init__(self, parties: int) -> None:
        super().__init__()
        self._barrier = threading.Barrier(parties, timeout=5)
        self._pending = parties
        self._pending_lock = threading.Lock()

    def get(self, email: str) -> User:
        with self._pending_lock:
            hold = self._pending > 0
            self._pending -= 1
        try:
            return super().get(email)
        finally:
            if hold:
                self._barrier.wait()


@pytest.fixture
def interleaving_storage() -> Callable[[int], InterleavingStorage]:
    """Factory for storages that line up concurrent lookups."""
    return InterleavingStorage
