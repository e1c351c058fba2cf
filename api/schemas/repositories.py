"""
Repository API Schemas - Request/response models for repository endpoints
"""

from typing import List
from pydantic import BaseModel, Field

from repo_tracker.schemas import Repository


class RepositoryPayload(BaseModel):
    """
    Body for creating or replacing a repository.

    Content is not validated beyond types: empty titles and empty
    techs lists are accepted.
    """

    title: str = Field(..., description="Repository title")
    url: str = Field(..., description="Repository URL (must be unique)")
    techs: List[str] = Field(
        default_factory=list,
        description="Technology tags (e.g. ['Node', 'React'])"
    )


class RepositoryResponse(BaseModel):
    """A repository as returned by the API"""

    id: str = Field(..., description="Server generated identifier")
    title: str = Field(..., description="Repository title")
    url: str = Field(..., description="Repository URL")
    techs: List[str] = Field(..., description="Technology tags")
    likes: int = Field(..., ge=0, description="Number of likes")
    dislikes: int = Field(..., ge=0, description="Number of dislikes")

    @classmethod
    def from_record(cls, record: Repository) -> "RepositoryResponse":
        return cls(
            id=record.id,
            title=record.title,
            url=record.url,
            techs=record.techs,
            likes=record.likes,
            dislikes=record.dislikes
        )


class ErrorResponse(BaseModel):
    """Body of a 400 response"""

    code: str = Field(..., description="Stable error code ('001' not found, '002' duplicate url)")
    reason: str = Field(..., description="Human-readable reason")
