"""Health-safety evaluation of products against a profile."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from food_safety.domain.products import Product
from food_safety.domain.profiles import (
    HealthCondition,
    Profile,
    RosterEntry,
    build_roster,
)
from food_safety.domain.rules import DEFAULT_REGISTRY, ConditionRegistry
from food_safety.domain.safety import SEVERITY_HIGH, SafetyWarning

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SafetyEvaluator:
    """Evaluates a product for every person on a profile's roster."""

    registry: ConditionRegistry = field(default_factory=lambda: DEFAULT_REGISTRY)

    def evaluate(self, product: Product, profile: Profile) -> list[SafetyWarning]:
        """Return warnings in roster order, then condition order."""
        allergens = normalize_allergens(product.allergens)
        warnings: list[SafetyWarning] = []
        for person in build_roster(profile):
            for condition in person.conditions:
                warning = self._check(person, condition, product, allergens)
                if warning is not None:
                    warnings.append(warning)
        return warnings

    def _check(
        self,
        person: RosterEntry,
        condition: HealthCondition,
        product: Product,
        allergens: frozenset[str],
    ) -> SafetyWarning | None:
        if condition.type == "allergy":
            subtype = condition.subtype
            if not subtype or subtype.lower() not in allergens:
                return None
            return SafetyWarning(
                message=(
                    f"⚠️ {_describe(person)}: {condition.label} - Contains {subtype}"
                ),
                severity=SEVERITY_HIGH,
                person=person.name,
                condition_id=condition.id,
            )

        rule = self.registry.get(condition.type)
        if rule is None:
            return None
        value = _nutrient_value(product.nutrients, rule.nutrient_key)
        if value is None:
            return None
        severity = rule.classify(value)
        if severity is None:
            return None
        denominator = product.quantity or "100g"
        return SafetyWarning(
            message=(
                f"⚠️ {_describe(person)}: {condition.label} - "
                f"High {rule.focus} ({_format_amount(value)}g/{denominator})"
            ),
            severity=severity,
            person=person.name,
            condition_id=condition.id,
        )


def normalize_allergens(tags: Iterable[str]) -> frozenset[str]:
    """Strip language prefixes like ``en:`` and lower-case allergen tags."""
    normalized = set()
    for tag in tags:
        if not tag:
            continue
        bare = tag.split(":", 1)[-1].strip().lower()
        if bare:
            normalized.add(bare)
    return frozenset(normalized)


def _describe(person: RosterEntry) -> str:
    if person.is_primary:
        return f"You ({person.name})"
    return f"{person.name} ({person.relationship})"


def _nutrient_value(nutrients: Mapping[str, object], key: str) -> float | None:
    """Return a nutrient as float, or None when absent or unusable."""
    raw = nutrients.get(key)
    if raw is None or isinstance(raw, bool):
        return None
    try:
        return float(raw)
    except (TypeError, ValueError):
        _logger.debug("Skipping non-numeric nutrient %s=%r", key, raw)
        return None


def _format_amount(value: float) -> str:
    """Render an amount without a trailing ``.0``."""
    if value.is_integer():
        return str(int(value))
    return str(value)
