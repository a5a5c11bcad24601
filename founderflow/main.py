"""
Founder Flow Backend - FastAPI Application
Main entry point with all routes configured.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from founderflow.config import Settings
from founderflow.core.exceptions import register_exception_handlers
from founderflow.core.logging_config import setup_logging
from founderflow.database import build_engine, build_session_factory, init_db
from founderflow.schemas.common import HealthResponse
from founderflow.services.integrations.base import MessageGenerator
from founderflow.services.integrations.gemini import GeminiMessageGenerator

# Import all API routers
from founderflow.api import admin, subscription, user_profile, outreach, link_preview

VERSION = "1.0.0"

logger = logging.getLogger(__name__)


def _default_generator(settings: Settings) -> Optional[MessageGenerator]:
    if not settings.GEMINI_API_KEY:
        logger.warning("GEMINI_API_KEY not set; outreach generation is disabled")
        return None
    return GeminiMessageGenerator(settings.GEMINI_API_KEY, model_name=settings.AI_MODEL)


def create_app(
    settings: Optional[Settings] = None,
    *,
    message_generator: Optional[MessageGenerator] = None,
    http_client: Optional[httpx.AsyncClient] = None
) -> FastAPI:
    """
    Build the application.

    Args:
        settings: Defaults to Settings() read from the environment
        message_generator: Overrides the Gemini client
        http_client: Overrides the outbound client used for enrichment and link previews
    """
    settings = settings or Settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    engine = build_engine(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events."""
        # Startup
        await init_db(engine)
        client = http_client or httpx.AsyncClient()
        app.state.http_client = client
        if message_generator is not None:
            app.state.message_generator = message_generator
        else:
            app.state.message_generator = _default_generator(settings)
        logger.info("Founder Flow API started")
        yield
        # Shutdown
        if http_client is None:
            await client.aclose()
        await engine.dispose()

    app = FastAPI(
        title="Founder Flow API",
        description="Founder and job-lead outreach platform",
        version=VERSION,
        lifespan=lifespan
    )
    app.state.settings = settings
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_URL],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include all routers
    app.include_router(admin.router)
    app.include_router(subscription.router)
    app.include_router(user_profile.router)
    app.include_router(outreach.router)
    app.include_router(link_preview.router)

    @app.get("/")
    async def root():
        """Service banner."""
        return {
            "message": "Founder Flow API is running",
            "version": VERSION,
            "docs": "/docs"
        }

    @app.get("/health", response_model=HealthResponse)
    async def health():
        """Detailed health check."""
        return {
            "status": "healthy",
            "version": VERSION
        }

    return app


app = create_app()
