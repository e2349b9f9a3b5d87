"""Error Handlers — global exception handlers producing plain-text error bodies.

Invariants:
    - ProfileServiceError → its own status and message (message is client-safe)
    - RequestValidationError (undecodable or mistyped body) → 400 "invalid JSON"
    - Exception (catch-all) → 500 "internal server error", never leaks internal details

Design Decisions:
    - Plain text over a JSON envelope: the form client displays the body verbatim
    - Three-layer handler: domain (ProfileServiceError), decoding (Pydantic), catch-all
    - Catch-all runs as http middleware inside CORSMiddleware, not in ServerErrorMiddleware
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse

from profile_service.core.errors import ProfileServiceError, ErrorSeverity

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_service_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_service_error_handler(app: FastAPI) -> None:
    """Register profile service domain/infrastructure error handler."""

    @app.exception_handler(ProfileServiceError)
    async def service_error_handler(request: Request, exc: ProfileServiceError):
        """Handle all profile service errors."""
        level = (
            logging.ERROR
            if exc.severity in (ErrorSeverity.ERROR, ErrorSeverity.CRITICAL)
            else logging.WARNING
        )
        logger.log(
            level,
            f"ProfileServiceError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return PlainTextResponse(exc.message, status_code=exc.http_status)


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic request-decoding error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Body could not be decoded into a ProfileSubmission."""
        logger.warning(
            f"Undecodable request body on {request.url.path}: {exc.errors()}",
        )
        return PlainTextResponse(
            "invalid JSON", status_code=status.HTTP_400_BAD_REQUEST,
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler.

    Middleware, not exception_handler(Exception): it must sit inside CORS so
    500 responses carry CORS headers. Register before add_default_middlewares.
    """

    @app.middleware("http")
    async def generic_error_handler(request: Request, call_next):
        """Catch-all. Never leaks internal details."""
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error(
                f"Unhandled exception on {request.url.path}: {exc}",
                exc_info=True,
            )
            return PlainTextResponse(
                "internal server error",
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
