"""Observability configuration using Logfire.

Usage:
    import logfire

    logfire.info("Question created", question_id=question.id, author=author)

    with logfire.span("vote_service.vote", target_id=target_id):
        ...
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from qeta.config import Settings

SERVICE_NAME = "qeta-backend"
SERVICE_VERSION = "0.1.0"

# Credential carriers that must never reach telemetry
_SCRUB_PATTERNS = ["auth_token", "bearer"]

# Path parameters copied onto request spans
_TRACED_PATH_PARAMS = ("question_id", "answer_id", "comment_id", "view")


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the API process or a script.

    Telemetry goes to Logfire cloud when requested explicitly, or when a
    token is configured. Otherwise it is console-only.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    if observability.send_to_logfire is not None:
        send_to_logfire = observability.send_to_logfire
    else:
        send_to_logfire = bool(observability.logfire_token)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=observability.logfire_token,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=_SCRUB_PATTERNS),
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        anonymous_access=settings.auth.allow_anonymous,
        permissions_enabled=settings.permissions.enabled,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    result = {**attributes, "path": request.url.path}
    if hasattr(request, "method"):
        result["method"] = request.method

    for name in _TRACED_PATH_PARAMS:
        if name in request.path_params:
            result[name] = request.path_params[name]

    # Whether the caller presented credentials at all, never the credentials
    result["authenticated"] = (
        "authorization" in request.headers or "auth_token" in request.cookies
    )
    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request with its route parameters.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace content store queries.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
    logfire.info("SQLAlchemy instrumented")
