"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting the storage
adapter and the registration service into routes.
"""

from fastapi import Request

from src.domain.ports import UserService, UserStorage
from src.domain.registration import RegistrationService


def get_storage(request: Request) -> UserStorage:
    """
    Get the storage adapter from app state.

    The storage is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.storage


def get_user_service(request: Request) -> UserService:
    """Create the registration service around the app's storage."""
    return RegistrationService(storage=get_storage(request))
