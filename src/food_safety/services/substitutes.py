"""Safer substitute suggestions using an LLM."""

import logging
from dataclasses import dataclass
from typing import Protocol

from food_safety.domain.profiles import Profile, build_roster
from food_safety.domain.safety import SubstituteSuggestions
from food_safety.errors import UpstreamError

MAX_SUBSTITUTES = 5

SUBSTITUTES_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "substitutes": {
            "type": "array",
            "items": {"type": "string"},
        }
    },
    "required": ["substitutes"],
    "additionalProperties": False,
}

_logger = logging.getLogger(__name__)


class CompletionClient(Protocol):
    """Interface for structured LLM text completion."""

    async def complete(
        self,
        *,
        model: str,
        store: bool,
        prompt: str,
        schema: dict[str, object],
        schema_name: str,
    ) -> dict[str, object]:
        """Return structured completion data matching ``schema``."""


@dataclass
class SubstituteService:
    """Suggests alternative products that suit a profile's roster."""

    client: CompletionClient
    model: str
    store: bool = False

    async def suggest(
        self, product_name: str, profile: Profile
    ) -> SubstituteSuggestions:
        """Return up to five alternatives for ``product_name``."""
        health_issues, allergies = restrictions_for(profile)
        prompt = (
            f'Suggest {MAX_SUBSTITUTES} safe alternative products for "{product_name}" '
            "considering these health restrictions:\n"
            f"- Health issues: {', '.join(health_issues) or 'none'}\n"
            f"- Allergies: {', '.join(allergies) or 'none'}\n"
            "Return only product names that avoid problematic ingredients."
        )
        try:
            raw = await self.client.complete(
                model=self.model,
                store=self.store,
                prompt=prompt,
                schema=SUBSTITUTES_SCHEMA,
                schema_name="substitutes",
            )
        except Exception as exc:
            _logger.warning("Substitute lookup failed for %s: %s", product_name, exc)
            raise UpstreamError("Substitute suggestions unavailable") from exc
        names = raw.get("substitutes") if isinstance(raw, dict) else None
        substitutes: list[str] = []
        for name in names or []:
            text = str(name).strip()
            if text and text not in substitutes:
                substitutes.append(text)
        return SubstituteSuggestions(
            product_name=product_name, substitutes=substitutes[:MAX_SUBSTITUTES]
        )


def restrictions_for(profile: Profile) -> tuple[list[str], list[str]]:
    """Return (health issue labels, allergy names) across the roster."""
    health_issues: list[str] = []
    allergies: list[str] = []
    for person in build_roster(profile):
        for condition in person.conditions:
            if condition.type == "allergy":
                if condition.subtype and condition.subtype not in allergies:
                    allergies.append(condition.subtype)
            elif condition.label and condition.label not in health_issues:
                health_issues.append(condition.label)
    return health_issues, allergies
