"""
Brewery Backend — Shared Pydantic Schemas
===========================================

What:  Base model for wire-format schemas plus the error and health envelopes.
Why:   Every resource speaks camelCase JSON (`beerName`, `quantityOnHand`)
       while Python code keeps snake_case attribute names.
How:   `alias_generator=to_camel` produces the wire names; `populate_by_name`
       lets mappers and tests construct models with the Python names.
       FastAPI serializes `response_model`s by alias automatically.
"""

from typing import Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Base class for every schema exchanged over HTTP."""

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
    }


class ErrorResponse(BaseModel):
    """
    What:  Standardized error response format for all API errors.

    Fields:
        error: Machine-readable error code ("validation_error", "not_found", ...)
        message: Human-readable description
        details: Optional extra context (validation responses carry `violations`)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "not_found",
            "message": "Beer with ID '99' was not found",
            "request_id": "3f2a9c1e"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and database status.
    Who:   Returned by GET /health for monitoring and load balancer probes.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
