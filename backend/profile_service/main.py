"""Profile Service API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ProfileServiceError → plain-text responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup via lifespan; schema created if absent
      when database_auto_create is on

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - serve() wraps uvicorn so `profile-service` starts the API with configured host/port
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from profile_service.api.error_handlers import register_error_handlers
from profile_service.api.middlewares import add_default_middlewares
from profile_service.api.routes import health, occupations, profiles
from profile_service.config import get_settings
from profile_service.infrastructure.database import init_db
from profile_service.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_auto_create:
        await manager.create_schema()
    logger.info("Profile service started")
    yield
    await manager.dispose()
    logger.info("Profile service shutting down")


app = FastAPI(
    title="Profile Service API", version="1.0.0", lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(occupations.router)
app.include_router(profiles.router)

# Order matters: CORS must wrap the catch-all error middleware
register_error_handlers(app)
add_default_middlewares(app, get_settings())


def serve() -> None:
    """Run the API under uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "profile_service.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
