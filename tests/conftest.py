"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- A fresh in-memory storage per test
- A registration service wired to that storage
- A test client running the full app lifespan
"""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from src.adapters.repository.memory import InMemoryUserStorage
from src.api.main import app
from src.domain.registration import RegistrationService


@pytest.fixture
def storage() -> InMemoryUserStorage:
    """Create an empty storage for each test."""
    return InMemoryUserStorage()


@pytest.fixture
def service(storage: InMemoryUserStorage) -> RegistrationService:
    """Create a registration service around the test storage."""
    return RegistrationService(storage=storage)


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Create test client; entering it runs the lifespan and a fresh storage."""
    with TestClient(app) as test_client:
        yield test_client
