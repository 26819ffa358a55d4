"""Profile endpoints."""

from fastapi import APIRouter, Depends, Query

from food_safety.api.deps import get_container
from food_safety.api.schemas import ProfilePayload, ProfileResponse
from food_safety.containers import AppContainer

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("")
async def get_profile(
    email: str = Query(min_length=1),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the stored profile for an email."""
    profile = container.profile_service.get_profile(email)
    stored = ProfileResponse.from_domain(profile)
    return {"success": True, "profile": stored.model_dump()}


@router.post("")
async def save_profile(
    body: ProfilePayload, container: AppContainer = Depends(get_container)
) -> dict[str, object]:
    """Validate and store a profile wholesale."""
    profile = container.profile_service.save_profile(body.to_domain())
    stored = ProfileResponse.from_domain(profile)
    return {"success": True, "profile": stored.model_dump()}
