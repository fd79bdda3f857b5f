"""
Pydantic schemas shared by every router.

JSON field names are camelCase on the wire; Python attributes stay
snake_case. No business logic belongs here.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serializing to camelCase while accepting either casing."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    database: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    success: bool = False
    error: str
    detail: str | None = None


class MessageResponse(CamelModel):
    success: bool = True
    message: str
