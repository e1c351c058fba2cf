"""
API Dependencies - Application state and FastAPI dependency injection

The repository store is created by the application factory and kept on
``app.state``; handlers receive it through ``Depends(get_repository_store)``.
"""

import logging
from datetime import datetime
from typing import Optional
from contextlib import asynccontextmanager

from fastapi import Depends, Request

from api.stores.base import BaseRepositoryStore
from api.stores.memory import InMemoryRepositoryStore

logger = logging.getLogger(__name__)


class AppState:
    """
    Application state - holds the repository store.

    One instance per application, shared across all requests.
    """

    def __init__(self, store: Optional[BaseRepositoryStore] = None):
        self.store: BaseRepositoryStore = store if store is not None else InMemoryRepositoryStore()
        self.started_at: Optional[datetime] = None

    def mark_started(self) -> None:
        self.started_at = datetime.now()

    def is_ready(self) -> bool:
        """Ready once the lifespan startup has run"""
        return self.started_at is not None

    def get_status(self) -> dict:
        """Get current store status"""
        return {
            "ready": self.is_ready(),
            "store": type(self.store).__name__,
            "repository_count": self.store.count(),
            "started_at": self.started_at.isoformat() if self.started_at else None,
        }


def get_app_state(request: Request) -> AppState:
    """
    FastAPI dependency to access app state.

    Usage in routers:
        @router.get("/example")
        async def example(state: AppState = Depends(get_app_state)):
            store = state.store
            ...
    """
    return request.app.state.app_state


def get_repository_store(state: AppState = Depends(get_app_state)) -> BaseRepositoryStore:
    """
    FastAPI dependency to access the repository store.

    Usage in routers:
        @router.get("/example")
        async def example(store: BaseRepositoryStore = Depends(get_repository_store)):
            records = store.list()
            ...
    """
    return state.store


@asynccontextmanager
async def lifespan_handler(app):
    """
    FastAPI lifespan context manager for startup/shutdown.

    Usage in main.py:
        app = FastAPI(lifespan=lifespan_handler)
    """
    logger.info("FastAPI starting up...")
    state: AppState = app.state.app_state
    state.mark_started()

    yield  # App is now running

    # Nothing is persisted: records die with the process
    logger.info(f"FastAPI shutting down, discarding {state.store.count()} repositories")
    logger.info("Shutdown complete")
