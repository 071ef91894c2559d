"""
User entity and registration input.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A registered user, keyed by email."""

    email: str
    name: str


@dataclass(frozen=True)
class RegisterParams:
    """Registration input, already checked by the transport layer."""

    email: str
    name: str

    def to_user(self) -> User:
        return User(email=self.email, name=self.name)
