"""Repository adapters - Storage implementations."""

from .memory import InMemoryUserStorage

__all__ = ["InMemoryUserStorage"]
