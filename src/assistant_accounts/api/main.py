"""
Assistant Accounts API Server

FastAPI application that exposes assistant account management
through REST API endpoints.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from assistant_accounts.api.routes import assistants
from assistant_accounts.config import AppConfig, load_config
from assistant_accounts.database.repository import AssistantRepository
from assistant_accounts.security.sanitizer import Sanitizer

logger = logging.getLogger("assistant_accounts.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Connect the repository on startup and close it on shutdown."""
    repository = app.state.repository
    await repository.connect()
    logger.info("Assistant Accounts API started")
    yield
    await repository.disconnect()


def create_app(
    config: Optional[AppConfig] = None,
    repository: Optional[AssistantRepository] = None,
) -> FastAPI:
    """Build the application with its config, repository and sanitizer."""
    if config is None:
        config = load_config()

    app = FastAPI(
        title="Assistant Accounts API",
        description="Admin API for managing assistant accounts",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.repository = repository or AssistantRepository(config.mongo)
    app.state.sanitizer = Sanitizer(max_depth=config.security.max_payload_depth)

    # CORS middleware for frontend
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(assistants.router, prefix="/api/auth/assistants", tags=["Assistants"])

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {"status": "ok", "service": "Assistant Accounts API"}

    return app


app = create_app()
