"""
Contact Book Backend — Pydantic Request/Response Schemas
==========================================================

What:  Pydantic models defining the JSON contract of the contacts API.
Why:   Automatic serialization and OpenAPI doc generation, kept separate from
       the SQLAlchemy model so the wire format can evolve independently.
Who:   Used by ContactService as its return type and by route handlers for
       request decoding and response serialization.

Wire format:
    Contact:  {"id": 1, "name": "...", "address": "...", "email": "..."}
    Error:    {"code": 404, "message": "Not Found"}
"""

from typing import Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Response Models — What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class ContactResponse(BaseModel):
    """
    What:  Full representation of a stored contact.
    Who:   Returned by every successful contacts endpoint except DELETE.
    """
    id: int = Field(description="Identifier assigned by the database on creation")
    name: str = Field(default="", description="Contact name")
    address: str = Field(default="", description="Postal address")
    email: str = Field(default="", description="Email address")

    model_config = {"from_attributes": True}


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the client sends in the body
# ══════════════════════════════════════════════════════════════════════════


class ContactPayload(BaseModel):
    """
    What:  Fields a client may send on POST or PUT.
    How:   Every field is optional; `model_dump(exclude_unset=True)` yields only
           the keys actually present in the body, which drives the partial
           merge on PUT. Unknown keys (including `id`) are ignored.
    """
    name: Optional[str] = None
    address: Optional[str] = None
    email: Optional[str] = None

    model_config = {"extra": "ignore"}


class ContactCreate(BaseModel):
    """
    What:  A contact about to be inserted.
    Why:   Missing fields decode as empty strings, never NULL.
    """
    name: str = ""
    address: str = ""
    email: str = ""


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Error body returned by every failing endpoint.

    Example:
        {"code": 404, "message": "Not Found"}
    """
    code: int = Field(description="HTTP status code of the failure")
    message: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
