"""
Exception handlers - map store errors to HTTP responses
"""

import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from repo_tracker.errors import RepositoryStoreError

logger = logging.getLogger(__name__)


async def repository_store_error_handler(request: Request, exc: RepositoryStoreError) -> JSONResponse:
    """Store errors are client errors: 400 with {code, reason}."""
    logger.info(f"{request.method} {request.url.path} rejected with code {exc.code}")
    return JSONResponse(status_code=400, content=exc.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RepositoryStoreError, repository_store_error_handler)
