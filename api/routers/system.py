"""
System Router - Host information endpoint
"""

from fastapi import APIRouter

from api.schemas.system import WhoAmIResponse
from repo_tracker.utils.host import get_host_info

router = APIRouter()


@router.get("/whoami", response_model=WhoAmIResponse)
async def whoami() -> WhoAmIResponse:
    """Return basic info about the server OS."""
    return WhoAmIResponse(**get_host_info())
