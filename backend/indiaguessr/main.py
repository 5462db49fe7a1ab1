import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routers import divisions, game
from .services.divisions import load_divisions
from .services.engine import GameEngine
from .services.sessions import SessionStore
from .config import get_settings

settings = get_settings()
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def create_app(
    engine: Optional[GameEngine] = None,
    store: Optional[SessionStore] = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        engine: Optional preconfigured engine; built from settings otherwise
        store: Optional session registry; sized from settings otherwise

    Returns:
        Configured application
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Lifecycle events for the application."""
        # Startup: load the division table and an empty session registry
        app.state.engine = engine or GameEngine.from_settings(
            load_divisions(settings.DIVISIONS_FILE), settings
        )
        app.state.sessions = store if store is not None else SessionStore(settings.MAX_SESSIONS)
        yield
        logger.info("Stop server with %d live game sessions", len(app.state.sessions))

    app = FastAPI(
        title="IndiaGuessr",
        description="Guess which state a random point on the map falls in",
        version="1.0.0",
        lifespan=lifespan
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include routers
    app.include_router(divisions.router, prefix="/api")
    app.include_router(game.router, prefix="/api")

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": "Welcome to IndiaGuessr API",
            "docs": "/docs",
            "health": "ok"
        }

    @app.get("/api/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
