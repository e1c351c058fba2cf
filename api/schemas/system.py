"""
System API Schemas - Host and service status models
"""

from typing import Any, Dict
from pydantic import BaseModel, Field


class WhoAmIResponse(BaseModel):
    """Basic information about the server host"""

    hostname: str = Field(..., description="Host name")
    type: str = Field(..., description="Operating system name")
    arch: str = Field(..., description="Machine architecture")
    platform: str = Field(..., description="Platform identifier")


class ReadinessResponse(BaseModel):
    """Readiness probe result"""

    ready: bool = Field(..., description="True once startup has completed")
    details: Dict[str, Any] = Field(..., description="Store status")
