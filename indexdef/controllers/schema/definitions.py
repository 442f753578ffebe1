"""Request/response schemas for the /definitions endpoints."""

from typing import Any

from pydantic import BaseModel, Field


class DefinitionRequest(BaseModel):
    """POST /definitions request body."""

    definition: str | dict[str, Any] = Field(
        ...,
        description="Profile name (e.g. fulltext_default) or an inline index definition object",
    )


class DefinitionResponse(BaseModel):
    """Rendered index definition."""

    profile: str | None = Field(default=None, description="Profile name when rendered from a profile")
    definition: dict[str, Any] = Field(..., description="Index definition tree in JSON form")


class ProfileListResponse(BaseModel):
    """GET /definitions/profiles response body."""

    profiles: list[str] = Field(default_factory=list)
