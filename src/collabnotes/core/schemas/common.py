"""
Shared response schemas - errors, health
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class FieldError(BaseModel):
    path: str
    message: str


class ErrorResponse(BaseModel):
    """Standard error response schema."""

    status: int = Field(description="HTTP status code")
    message: str = Field(description="Human-readable error message")
    request_id: Optional[str] = Field(default=None, description="Request correlation id")
    errors: Optional[List[FieldError]] = Field(default=None, description="Schema violations")
    stack: Optional[str] = Field(default=None, description="Traceback, development only")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "status": 403,
                "message": "Only the owner may delete this note",
                "request_id": "3f8a2c4e-5d1b-4c6a-9e2f-7b8d9c0a1e2f",
            }
        }
    )


class HealthCheckResponse(BaseModel):
    """Health check response schema."""

    status: str = Field(description="Overall status: healthy or unhealthy")
    timestamp: datetime = Field(description="Check timestamp")
    version: str = Field(description="Application version")
    checks: Dict[str, Dict[str, Any]] = Field(description="Per dependency results")
