"""Nutrient threshold rules for health conditions."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

DEFAULT_HIGH_RATIO = 1.5


@dataclass(frozen=True)
class NutrientRule:
    """Threshold rule inspecting one per-100g nutrient.

    A value strictly above ``medium_threshold`` is a medium concern; a value
    at or above ``high_threshold`` is a high concern.
    """

    condition_type: str
    nutrient_key: str
    medium_threshold: float
    focus: str
    high_ratio: float = DEFAULT_HIGH_RATIO

    @property
    def high_threshold(self) -> float:
        """Return the high threshold derived from the medium one."""
        return self.medium_threshold * self.high_ratio

    def classify(self, value: float) -> str | None:
        """Return ``"high"``, ``"medium"`` or None for a measured value."""
        if value >= self.high_threshold:
            return "high"
        if value > self.medium_threshold:
            return "medium"
        return None


class ConditionRegistry(Mapping[str, NutrientRule]):
    """Read-only mapping of condition type to nutrient rule."""

    def __init__(self, rules: Mapping[str, NutrientRule]) -> None:
        self._rules = MappingProxyType(dict(rules))

    def __getitem__(self, condition_type: str) -> NutrientRule:
        return self._rules[condition_type]

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"ConditionRegistry({dict(self._rules)!r})"


def build_registry(high_ratio: float = DEFAULT_HIGH_RATIO) -> ConditionRegistry:
    """Build the standard registry with the given high/medium ratio."""
    rules = (
        NutrientRule("diabetes", "sugars_100g", 10.0, "sugar content", high_ratio),
        NutrientRule("heart", "saturated-fat_100g", 5.0, "saturated fat", high_ratio),
        NutrientRule("hypertension", "salt_100g", 1.5, "salt content", high_ratio),
    )
    return ConditionRegistry({rule.condition_type: rule for rule in rules})


DEFAULT_REGISTRY = build_registry()
