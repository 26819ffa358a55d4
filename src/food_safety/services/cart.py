"""Warning aggregation across multiple products."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from food_safety.domain.products import Product
from food_safety.domain.profiles import Profile
from food_safety.services.safety import SafetyEvaluator


@dataclass(frozen=True)
class CartAggregator:
    """Combines per-product warnings into one deduplicated list."""

    evaluator: SafetyEvaluator = field(default_factory=SafetyEvaluator)

    def aggregate(self, products: Iterable[Product], profile: Profile) -> list[str]:
        """Return unique warning messages in first-occurrence order.

        Messages are compared by exact text, so the same condition triggered
        by different measured values is reported once per distinct value.
        """
        seen: dict[str, None] = {}
        for product in products:
            for warning in self.evaluator.evaluate(product, profile):
                seen.setdefault(warning.message, None)
        return list(seen)
