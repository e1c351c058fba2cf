"""
In-Memory Repository Store - Process-local record storage

Records live in an ordered list for the lifetime of the process.
Nothing is persisted: the store starts empty and is discarded at shutdown.
"""

import logging
import threading
import uuid
from typing import Callable, Optional, List, Set

from repo_tracker.schemas import Repository
from repo_tracker.errors import DuplicateURLError, RepositoryNotFoundError
from api.stores.base import BaseRepositoryStore

logger = logging.getLogger(__name__)


def _uuid4_str() -> str:
    return str(uuid.uuid4())


class InMemoryRepositoryStore(BaseRepositoryStore):
    """Store implementation backed by a list (insertion order = listing order)"""

    def __init__(self, id_factory: Callable[[], str] = _uuid4_str):
        self._records: List[Repository] = []
        self._issued_ids: Set[str] = set()
        self._id_factory = id_factory
        # One lock around each whole operation
        self._lock = threading.Lock()

        logger.info("InMemoryRepositoryStore initialized")

    def _index_of(self, id: str) -> int:
        for ix, record in enumerate(self._records):
            if record.id == id:
                return ix
        logger.warning(f"Repository not found: {id}")
        raise RepositoryNotFoundError(id)

    def _ensure_url_free(self, url: str, exclude_id: Optional[str] = None) -> None:
        for record in self._records:
            if record.url == url and record.id != exclude_id:
                logger.warning(f"URL already used by repository {record.id}: {url}")
                raise DuplicateURLError(url)

    def _new_id(self) -> str:
        new_id = self._id_factory()
        # Ids are never reused, even after the record is deleted
        while new_id in self._issued_ids:
            new_id = self._id_factory()
        self._issued_ids.add(new_id)
        return new_id

    def list(
        self,
        id: Optional[str] = None,
        title: Optional[str] = None,
        tech: Optional[str] = None
    ) -> List[Repository]:
        with self._lock:
            if id:
                matches = [r for r in self._records if r.id == id]
            else:
                matches = self._records
                if title:
                    matches = [r for r in matches if r.title_contains(title)]
                if tech:
                    matches = [r for r in matches if r.has_tech(tech)]

            logger.debug(f"Listed {len(matches)} of {len(self._records)} repositories")
            return [r.copy() for r in matches]

    def create(self, title: str, url: str, techs: List[str]) -> Repository:
        with self._lock:
            self._ensure_url_free(url)

            record = Repository(
                id=self._new_id(),
                title=title,
                url=url,
                techs=list(techs),
                likes=0,
                dislikes=0,
            )
            self._records.append(record)

            logger.info(f"Created repository {record.id} ({url})")
            return record.copy()

    def update(self, id: str, title: str, url: str, techs: List[str]) -> None:
        with self._lock:
            ix = self._index_of(id)
            self._ensure_url_free(url, exclude_id=id)

            record = self._records[ix]
            record.title = title
            record.url = url
            record.techs = list(techs)

            logger.info(f"Updated repository {id}")

    def delete(self, id: str) -> None:
        with self._lock:
            ix = self._index_of(id)
            del self._records[ix]

            logger.info(f"Deleted repository {id}")

    def like(self, id: str) -> None:
        with self._lock:
            record = self._records[self._index_of(id)]
            record.likes += 1

            logger.debug(f"Repository {id} likes: {record.likes}")

    def dislike(self, id: str) -> None:
        with self._lock:
            record = self._records[self._index_of(id)]
            record.dislikes += 1

            logger.debug(f"Repository {id} dislikes: {record.dislikes}")

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def clear(self) -> None:
        """Drop all records (useful for development/testing). Issued ids stay reserved."""
        with self._lock:
            logger.info(f"Clearing {len(self._records)} repositories")
            self._records.clear()
