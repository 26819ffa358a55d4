"""Request helpers shared by the API routers."""

from fastapi import Request

from food_safety.api.schemas import ProfilePayload
from food_safety.containers import AppContainer
from food_safety.domain.profiles import Profile


def get_container(request: Request) -> AppContainer:
    """Return the dependency container attached to the app."""
    return request.app.state.container


def resolve_profile(
    container: AppContainer, profile: ProfilePayload | None, email: str | None
) -> Profile:
    """Use an inline profile when given, otherwise load it by email."""
    if profile is not None:
        return profile.to_domain()
    return container.profile_service.get_profile(email or "")
