"""
API Dependencies

Per-app singletons exposed to routes through FastAPI dependency injection.
"""

from fastapi import HTTPException, Request

from assistant_accounts.database.repository import AssistantRepository
from assistant_accounts.security.sanitizer import Sanitizer


def get_repository(request: Request) -> AssistantRepository:
    """Repository for dependency injection."""
    repository = getattr(request.app.state, "repository", None)
    if repository is None:
        raise HTTPException(status_code=503, detail="Database not initialized")
    return repository


def get_sanitizer(request: Request) -> Sanitizer:
    return request.app.state.sanitizer
