"""
UserBoard Backend — Pydantic Request/Response Schemas
=======================================================

What:  Plain transfer structures for the HTTP API, separate from the ORM entity.
How:   FastAPI validates request bodies against these models, serializes
       responses through them, and generates OpenAPI docs from them.
Who:   Used by route handlers and by UserService for entity conversion.

Validation:
    name and email are free text. Both are optional in the create payload
    and stored as null when absent; no format or emptiness check is applied.
    Unknown fields (including a client-supplied id) are ignored.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class UserCreate(BaseModel):
    """Body of POST /api/users."""
    name: Optional[str] = Field(default=None, description="Display name (free text)")
    email: Optional[str] = Field(default=None, description="Email address (free text)")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class UserResponse(BaseModel):
    """
    What:  Full representation of a stored user.
    Who:   Returned by POST /api/users and as items of GET /api/users.
    """
    id: int = Field(description="Storage-assigned identifier")
    name: Optional[str] = Field(default=None, description="Display name")
    email: Optional[str] = Field(default=None, description="Email address")

    model_config = {"from_attributes": True}


class ErrorResponse(BaseModel):
    """
    What:  Error body produced by the application's own exception handlers.

    Fields:
        error: Machine-readable error code (e.g., "server_error")
        message: Human-readable description
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and storage status.
    Who:   Returned by GET /health for monitoring checks.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    storage_backend: str = Field(description="Configured backend: memory, sql")
    storage: str = Field(description="Storage connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
