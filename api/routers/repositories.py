"""
Repositories Router - CRUD and like/dislike endpoints

Store errors (unknown id, duplicate url) are raised as exceptions and turned
into 400 responses by the handler registered in api.errors.
"""

import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Response, status

from api.schemas.repositories import ErrorResponse, RepositoryPayload, RepositoryResponse
from api.dependencies import get_repository_store
from api.stores.base import BaseRepositoryStore

router = APIRouter()
logger = logging.getLogger(__name__)

NOT_FOUND_RESPONSES = {400: {"model": ErrorResponse, "description": "Repository not found (code 001)"}}
DUPLICATE_URL_RESPONSES = {400: {"model": ErrorResponse, "description": "Duplicate url (code 002)"}}


@router.get("/repositories", response_model=List[RepositoryResponse])
async def list_repositories(
    id: Optional[str] = Query(None, description="Filter by exact id (exclusive of other filters)"),
    title: Optional[str] = Query(None, description="Filter by part of the title (case-insensitive)"),
    tech: Optional[str] = Query(None, description="Filter by technology tag (case-insensitive)"),
    store: BaseRepositoryStore = Depends(get_repository_store)
) -> List[RepositoryResponse]:
    """
    List repositories in creation order.

    When ``id`` is given only the id filter applies. Otherwise ``title`` and
    ``tech`` can be combined.
    """
    records = store.list(id=id, title=title, tech=tech)
    return [RepositoryResponse.from_record(r) for r in records]


@router.post(
    "/repositories",
    response_model=RepositoryResponse,
    status_code=status.HTTP_201_CREATED,
    responses=DUPLICATE_URL_RESPONSES
)
async def create_repository(
    payload: RepositoryPayload,
    store: BaseRepositoryStore = Depends(get_repository_store)
) -> RepositoryResponse:
    """Record a new repository starting with zero likes and dislikes."""
    record = store.create(title=payload.title, url=payload.url, techs=payload.techs)
    return RepositoryResponse.from_record(record)


@router.put(
    "/repositories/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses={400: {"model": ErrorResponse, "description": "Not found (001) or duplicate url (002)"}}
)
async def update_repository(
    id: str,
    payload: RepositoryPayload,
    store: BaseRepositoryStore = Depends(get_repository_store)
) -> Response:
    """Replace title, url and techs. Likes and dislikes are kept."""
    store.update(id, title=payload.title, url=payload.url, techs=payload.techs)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/repositories/{id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSES
)
async def delete_repository(
    id: str,
    store: BaseRepositoryStore = Depends(get_repository_store)
) -> Response:
    store.delete(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/repositories/{id}/like",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSES
)
async def like_repository(
    id: str,
    store: BaseRepositoryStore = Depends(get_repository_store)
) -> Response:
    store.like(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/repositories/{id}/dislike",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND_RESPONSES
)
async def dislike_repository(
    id: str,
    store: BaseRepositoryStore = Depends(get_repository_store)
) -> Response:
    store.dislike(id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
