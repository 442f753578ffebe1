"""/definitions: render Lucene index definitions from profiles or inline configs."""

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from indexdef.config.definitions.static import list_profile_names
from indexdef.controllers.schema.definitions import DefinitionRequest, DefinitionResponse, ProfileListResponse
from indexdef.services.definitions.assembler import render_definition

router = APIRouter(prefix="/definitions", tags=["definitions"])


@router.get("/profiles", response_model=ProfileListResponse)
async def list_profiles() -> ProfileListResponse:
    """Names of the static definition profiles."""
    return ProfileListResponse(profiles=list_profile_names())


@router.get("/{profile}", response_model=DefinitionResponse)
async def get_definition(profile: str) -> DefinitionResponse:
    """Render a static profile. 404 if the profile does not exist."""
    if profile not in list_profile_names():
        raise HTTPException(status_code=404, detail=f"Unknown index definition profile: {profile!r}")
    return DefinitionResponse(profile=profile, definition=render_definition(profile))


@router.post("", response_model=DefinitionResponse)
async def create_definition(body: DefinitionRequest) -> DefinitionResponse:
    """
    Render a definition from a profile name or an inline config. Nothing is stored;
    the same body always renders the same document. 422 for an invalid inline config,
    404 for an unknown profile name.
    """
    try:
        definition = render_definition(body.definition)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    profile = body.definition.strip() if isinstance(body.definition, str) else None
    return DefinitionResponse(profile=profile, definition=definition)
