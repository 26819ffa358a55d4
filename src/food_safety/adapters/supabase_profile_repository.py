"""Supabase-backed profile repository."""

from dataclasses import asdict, dataclass
from datetime import UTC, datetime

from supabase import Client

from food_safety.domain.profiles import (
    FamilyMember,
    HealthCondition,
    NutritionGoals,
    Profile,
)
from food_safety.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Stores each profile as one JSON document keyed by email."""

    client: Client

    def get_by_email(self, email: str) -> Profile | None:
        """Return the profile for an email, if present."""
        response = (
            self.client.table("profiles")
            .select("email, data")
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return profile_from_document(row.get("data") or {}, email=row["email"])

    def upsert(self, profile: Profile) -> Profile:
        """Insert or replace the profile row and return it."""
        response = (
            self.client.table("profiles")
            .upsert(
                {
                    "email": profile.email,
                    "data": profile_to_document(profile),
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="email",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save profile in Supabase")
        row = response.data[0]
        return profile_from_document(row.get("data") or {}, email=row["email"])


def profile_to_document(profile: Profile) -> dict[str, object]:
    """Convert a profile into a JSON-serializable document."""
    document = asdict(profile)
    document.pop("email", None)
    return document


def profile_from_document(document: dict[str, object], email: str) -> Profile:
    """Build a profile from a stored document."""
    goals = document.get("nutrition_goals") or {}
    return Profile(
        email=email,
        name=str(document.get("name") or ""),
        age=document.get("age"),
        gender=document.get("gender"),
        weight=document.get("weight"),
        height=document.get("height"),
        conditions=_conditions(document.get("conditions")),
        dietary_preferences=tuple(document.get("dietary_preferences") or ()),
        family_members=tuple(
            _family_member(member)
            for member in document.get("family_members") or []
            if isinstance(member, dict)
        ),
        nutrition_goals=NutritionGoals(
            weight_management=goals.get("weight_management") or "maintain",
            calorie_target=goals.get("calorie_target"),
            carbs_pct=goals.get("carbs_pct"),
            protein_pct=goals.get("protein_pct"),
            fats_pct=goals.get("fats_pct"),
        ),
    )


def _family_member(row: dict[str, object]) -> FamilyMember:
    return FamilyMember(
        id=str(row.get("id") or ""),
        name=str(row.get("name") or ""),
        relationship=str(row.get("relationship") or ""),
        conditions=_conditions(row.get("conditions")),
        include_in_recommendations=bool(row.get("include_in_recommendations", True)),
        age=row.get("age"),
        weight=row.get("weight"),
        height=row.get("height"),
        dietary_preferences=tuple(row.get("dietary_preferences") or ()),
        avatar_color=row.get("avatar_color"),
    )


def _conditions(rows: object) -> tuple[HealthCondition, ...]:
    if not isinstance(rows, list | tuple):
        return ()
    return tuple(
        HealthCondition(
            id=str(row.get("id") or ""),
            type=str(row.get("type") or "other"),
            label=str(row.get("label") or ""),
            severity=str(row.get("severity") or "moderate"),
            subtype=row.get("subtype"),
        )
        for row in rows
        if isinstance(row, dict)
    )
