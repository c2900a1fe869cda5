"""FastAPI application entrypoint. No business logic; only wiring and middleware."""

from dotenv import load_dotenv

load_dotenv()

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import install_error_handlers
from app.api.v1 import router as v1_router
from app.core.config import Settings, get_settings
from app.core.database import engine
from app.core.logging_config import configure_logging
from app.services.storage import build_storage_service


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the API: logger, CORS, error mapping and v1 routes."""
    settings = settings or get_settings()
    logger = configure_logging(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        app.state.storage = build_storage_service(settings, logger)
        logger.info("Aton CMS API started: env=%s", settings.APP_ENV)
        yield
        logger.info("Aton CMS API shutting down")
        engine.dispose()

    app = FastAPI(
        title="Aton CMS API",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.logger = logger
    app.state.storage = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Origin", "Content-Type", "Accept", "Authorization"],
        expose_headers=["Content-Length"],
    )

    install_error_handlers(app, logger)
    app.include_router(v1_router, prefix=settings.API_V1_PREFIX)

    @app.get("/")
    def root() -> dict[str, str]:
        """Root route; minimal payload for discovery."""
        return {"message": "Aton CMS API"}

    @app.get("/health")
    def health() -> dict[str, str]:
        """Liveness probe; no dependencies touched."""
        return {"status": "ok", "message": "Aton CMS API is running"}

    return app


app = create_app()
