"""Global exception handlers.

Domain errors map to HTTP statuses here, so routes and use cases raise
domain errors and never build error responses themselves:

    ValidationError / RequestValidationError -> 400 with field-level errors
    AuthenticationError                       -> 401
    NotAuthorizedError (non-author edit)      -> 401
    PermissionDeniedError                     -> 403
    NotFoundError                             -> 404
    ConflictError                             -> 409
    anything else                             -> opaque 500
"""

from typing import Any

import logfire
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from qeta.domain.error import (
    AuthenticationError,
    ConflictError,
    NotAuthorizedError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)

# Request part reported for validation errors, keyed by the first loc item
_ERROR_SOURCES = {"query": "query", "body": "body", "path": "path"}


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_validation_error_handlers(app)
    _register_domain_error_handlers(app)
    _register_generic_error_handler(app)


def _register_validation_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [_error_detail(e) for e in exc.errors()]
        logfire.warn("Request validation failed", path=request.url.path, errors=errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": errors, "type": _error_source(exc.errors())},
        )

    @app.exception_handler(ValidationError)
    async def domain_validation_error_handler(
        request: Request, exc: ValidationError
    ) -> JSONResponse:
        logfire.warn("Domain validation failed", path=request.url.path, error=str(exc))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "errors": [{"loc": [], "msg": str(exc), "type": "value_error"}],
                "type": "body",
            },
        )


def _register_domain_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(
        request: Request, exc: AuthenticationError
    ) -> JSONResponse:
        logfire.warn("Authentication failed", path=request.url.path, error=str(exc))
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": str(exc)},
        )

    @app.exception_handler(NotAuthorizedError)
    async def not_authorized_error_handler(
        request: Request, exc: NotAuthorizedError
    ) -> JSONResponse:
        logfire.warn("Non-author edit rejected", path=request.url.path, error=str(exc))
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": "Not authorized to edit this content"},
        )

    @app.exception_handler(PermissionDeniedError)
    async def permission_denied_error_handler(
        request: Request, exc: PermissionDeniedError
    ) -> JSONResponse:
        logfire.warn(
            "Permission denied",
            path=request.url.path,
            permission=exc.permission,
            viewer=exc.viewer,
        )
        return JSONResponse(
            status_code=status.HTTP_403_FORBIDDEN,
            content={"detail": f"Missing permission {exc.permission}"},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_error_handler(
        request: Request, exc: NotFoundError
    ) -> JSONResponse:
        logfire.info("Resource not found", path=request.url.path, error=str(exc))
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"detail": "Not Found"},
        )

    @app.exception_handler(ConflictError)
    async def conflict_error_handler(
        request: Request, exc: ConflictError
    ) -> JSONResponse:
        logfire.warn("Conflicting mutation", path=request.url.path, error=str(exc))
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": "Conflict"},
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception) -> JSONResponse:
        """Catch-all, never leaks internal details."""
        logfire.exception("Unhandled exception", path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal Server Error"},
        )


def _error_detail(error: dict[str, Any]) -> dict[str, Any]:
    return {
        "loc": [str(part) for part in error.get("loc", ())],
        "msg": error.get("msg", ""),
        "type": error.get("type", ""),
    }


def _error_source(errors: Any) -> str:
    for error in errors:
        loc = error.get("loc") or ()
        if loc and loc[0] in _ERROR_SOURCES:
            return _ERROR_SOURCES[loc[0]]
    return "body"
