"""FastAPI application."""

from typing import Optional

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from qeta.config import Settings
from qeta.interface.api.error_handlers import register_error_handlers
from qeta.interface.api.routes import (
    answers,
    comments,
    health,
    questions,
    tags,
    votes,
)
from qeta.util.di.container import create_container, setup_di
from qeta.util.observability import instrument_fastapi


def create_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use. Defaults to the production container;
            tests pass one with in-memory persistence.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Q&A API",
        description="Backend API for questions, answers, comments, votes and favorites",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    register_error_handlers(app_instance)

    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Register routes
    # Questions first: /questions/list/{view} must win over deeper routes
    app_instance.include_router(health.router)
    app_instance.include_router(questions.router)
    app_instance.include_router(answers.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(tags.router)

    return app_instance
