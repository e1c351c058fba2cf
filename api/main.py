"""
Repository Tracker - FastAPI Application

Main entry point for the API server.
Environment-agnostic: configuration reads from settings (.env file).
"""

import logging
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from repo_tracker import __version__
from repo_tracker.settings import Settings, get_settings
from repo_tracker.logging_setup import setup_logging
from api.dependencies import AppState, lifespan_handler
from api.errors import register_exception_handlers
from api.middleware import RequestTimingMiddleware
from api.routers import repositories, system, health
from api.stores.base import BaseRepositoryStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[BaseRepositoryStore] = None
) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        settings: Configuration (defaults to get_settings(), which reads .env)
        store: Repository store to serve (defaults to a fresh in-memory store)

    Returns:
        Configured FastAPI application instance
    """
    cfg = settings or get_settings()

    app = FastAPI(
        title="Repository Tracker API",
        description="In-memory catalog of code repositories with likes and dislikes",
        version=__version__,
        lifespan=lifespan_handler  # Handles startup/shutdown
    )
    app.state.app_state = AppState(store)
    app.state.settings = cfg

    # CORS configuration from settings
    logger.info(f"Configuring CORS with origins: {cfg.cors_origins}")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_credentials=cfg.cors_allow_credentials,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestTimingMiddleware)

    register_exception_handlers(app)

    # Mount routers
    app.include_router(system.router, tags=["system"])
    app.include_router(repositories.router, tags=["repositories"])
    app.include_router(health.router, prefix="/health", tags=["health"])

    @app.get("/")
    async def root():
        """Root endpoint - API info"""
        return {
            "name": "Repository Tracker API",
            "version": __version__,
            "environment": cfg.env,
            "status": "running",
            "docs": "/docs",
            "health": "/health/ready"
        }

    logger.info(f"FastAPI application created (env={cfg.env})")

    return app


# Get settings
cfg = get_settings()

# Configure logging
setup_logging(cfg.log_level)

# Create app instance
app = create_app(cfg)


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting API server on {cfg.api_host}:{cfg.api_port}")
    logger.info(f"Environment: {cfg.env}")
    logger.info(f"Reload: {cfg.api_reload}")
    logger.info(f"Workers: {cfg.api_workers}")

    uvicorn.run(
        "api.main:app",
        host=cfg.api_host,
        port=cfg.api_port,
        reload=cfg.api_reload,
        workers=cfg.api_workers if not cfg.api_reload else 1,  # Workers only work without reload
        log_level=cfg.log_level.lower()
    )
