"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance and its lifespan,
which owns the storage adapter for the lifetime of the process.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.adapters.repository.memory import InMemoryUserStorage
from src.api.routes import router

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "users",
        "description": "Register users and look them up by email",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Creates the storage adapter on startup and stores it in app state
    for dependency injection.
    """
    logger.info("Starting application...")

    app.state.storage = InMemoryUserStorage()

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")


app = FastAPI(
    title="user-registry",
    description="User registry API - Register users and look them up by email",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.include_router(router)
