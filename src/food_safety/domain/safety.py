"""Safety evaluation domain models."""

from dataclasses import dataclass

SEVERITY_HIGH = "high"
SEVERITY_MEDIUM = "medium"
# Reserved; the evaluator never emits it.
SEVERITY_LOW = "low"


@dataclass(frozen=True)
class SafetyWarning:
    """A single safety warning for one person and condition."""

    message: str
    severity: str
    person: str
    condition_id: str


@dataclass(frozen=True)
class SubstituteSuggestions:
    """Alternative products suggested for a product."""

    product_name: str
    substitutes: list[str]
