"""Main application entry point for Clarify."""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from clarify import __version__
from clarify.api.errors import register_exception_handlers
from clarify.api.middleware import APIKeyMiddleware, RateLimitMiddleware
from clarify.utils.config import Settings, get_settings
from clarify.utils.logging import configure_logging

_logger = logging.getLogger("clarify.main")


def _validate_production_env(settings: Settings) -> None:
    """Fail fast if required settings are missing in production."""
    if not settings.is_production():
        return

    missing = []
    if not settings.security.api_key:
        missing.append("SECURITY__API_KEY")
    if not settings.database.url or "sqlite" in settings.database.url:
        missing.append("DATABASE__URL (must be PostgreSQL in production)")

    if missing:
        msg = (
            "Production startup blocked, missing required settings: "
            + ", ".join(missing)
        )
        _logger.critical(msg)
        raise SystemExit(msg)

    if not settings.ai.api_key:
        _logger.warning("AI__API_KEY not set, suggestions will be unavailable")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()
    is_production = settings.is_production()

    configure_logging(settings.logging.level, settings.logging.json_output)

    app = FastAPI(
        title="Clarify API",
        description="Weighted decision analysis with pros/cons scoring",
        version=__version__,
        debug=False if is_production else settings.debug,
        docs_url=None if is_production else "/api/docs",
        redoc_url=None if is_production else "/api/redoc",
    )

    # Rate limiting runs after auth so unauthenticated requests aren't counted
    app.add_middleware(
        RateLimitMiddleware, limit_per_minute=settings.security.rate_limit_per_minute
    )
    app.add_middleware(APIKeyMiddleware, api_key=settings.security.api_key)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.security.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "X-API-Key", "X-Owner-Id"],
    )

    register_exception_handlers(app)

    from clarify.api.v1 import router as api_router

    app.include_router(api_router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {"message": "Clarify API", "version": __version__}

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    @app.on_event("startup")
    async def startup_event():
        """Initialize the database on startup."""
        _validate_production_env(settings)
        from clarify.core.database import init_database
        await init_database()

    @app.on_event("shutdown")
    async def shutdown_event():
        """Release pooled connections."""
        from clarify.api.dependencies import close_suggestion_generator
        from clarify.core.database import close_database
        await close_suggestion_generator()
        await close_database()

    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "clarify.main:app",
        host=settings.api.host,
        port=settings.api.port,
        reload=settings.api.reload,
    )


# Create the app instance
app = create_app()


if __name__ == "__main__":
    run()
