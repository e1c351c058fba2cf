"""
Base Repository Store - Abstract interface for repository records

This defines the contract that all store implementations must follow.
Allows swapping the in-memory store for a persistent one without
changing the routers.
"""

from abc import ABC, abstractmethod
from typing import Optional, List

from repo_tracker.schemas import Repository


class BaseRepositoryStore(ABC):
    """Abstract base class for repository record stores"""

    @abstractmethod
    def list(
        self,
        id: Optional[str] = None,
        title: Optional[str] = None,
        tech: Optional[str] = None
    ) -> List[Repository]:
        """
        List records in insertion order, optionally filtered.

        Args:
            id: Exact id match. When given, the other filters are ignored.
            title: Case-insensitive substring of the title
            tech: Case-insensitive exact match against one of the techs

        Returns:
            Matching records (may be empty)
        """
        pass

    @abstractmethod
    def create(self, title: str, url: str, techs: List[str]) -> Repository:
        """
        Add a new record with zero likes and dislikes.

        Raises:
            DuplicateURLError: another record already uses ``url``
        """
        pass

    @abstractmethod
    def update(self, id: str, title: str, url: str, techs: List[str]) -> None:
        """
        Replace title, url and techs of an existing record.

        Raises:
            RepositoryNotFoundError: no record has ``id`` (checked first)
            DuplicateURLError: a different record already uses ``url``
        """
        pass

    @abstractmethod
    def delete(self, id: str) -> None:
        """
        Remove a record.

        Raises:
            RepositoryNotFoundError: no record has ``id``
        """
        pass

    @abstractmethod
    def like(self, id: str) -> None:
        """Increment the likes counter. Raises RepositoryNotFoundError."""
        pass

    @abstractmethod
    def dislike(self, id: str) -> None:
        """Increment the dislikes counter. Raises RepositoryNotFoundError."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of live records"""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Drop every record. Issued ids stay reserved."""
        pass
