"""Health profile domain models."""

from dataclasses import dataclass, field

CONDITION_TYPES = ("allergy", "diabetes", "heart", "hypertension", "other")
CONDITION_SEVERITIES = ("mild", "moderate", "severe")


@dataclass(frozen=True)
class HealthCondition:
    """A health constraint attached to a person.

    ``type`` is normally one of ``CONDITION_TYPES``; other values are carried
    through untouched so newer condition kinds never break evaluation.
    ``severity`` is informational only.
    """

    id: str
    type: str
    label: str
    severity: str = "moderate"
    subtype: str | None = None


@dataclass(frozen=True)
class NutritionGoals:
    """Nutrition targets stored with a profile."""

    weight_management: str = "maintain"
    calorie_target: float | None = None
    carbs_pct: float | None = None
    protein_pct: float | None = None
    fats_pct: float | None = None


@dataclass(frozen=True)
class FamilyMember:
    """A family member whose conditions may join the evaluation roster."""

    id: str
    name: str
    relationship: str
    conditions: tuple[HealthCondition, ...] = ()
    include_in_recommendations: bool = True
    age: int | None = None
    weight: float | None = None
    height: float | None = None
    dietary_preferences: tuple[str, ...] = ()
    avatar_color: str | None = None


@dataclass(frozen=True)
class Profile:
    """A user's profile: the primary person inline plus family members."""

    name: str
    conditions: tuple[HealthCondition, ...] = ()
    family_members: tuple[FamilyMember, ...] = ()
    email: str | None = None
    age: int | None = None
    gender: str | None = None
    weight: float | None = None
    height: float | None = None
    dietary_preferences: tuple[str, ...] = ()
    nutrition_goals: NutritionGoals = field(default_factory=NutritionGoals)


@dataclass(frozen=True)
class RosterEntry:
    """One person considered in an evaluation pass."""

    name: str
    conditions: tuple[HealthCondition, ...]
    relationship: str | None = None

    @property
    def is_primary(self) -> bool:
        """Return True for the profile owner."""
        return self.relationship is None


def build_roster(profile: Profile) -> list[RosterEntry]:
    """Return the primary person followed by opted-in family members."""
    roster = [RosterEntry(name=profile.name, conditions=profile.conditions or ())]
    for member in profile.family_members:
        if not member.include_in_recommendations:
            continue
        roster.append(
            RosterEntry(
                name=member.name,
                conditions=member.conditions or (),
                relationship=member.relationship,
            )
        )
    return roster


COMMON_CONDITIONS: tuple[HealthCondition, ...] = (
    HealthCondition(
        id="diabetes-type1",
        type="diabetes",
        subtype="type1",
        severity="moderate",
        label="Type 1 Diabetes",
    ),
    HealthCondition(
        id="diabetes-type2",
        type="diabetes",
        subtype="type2",
        severity="moderate",
        label="Type 2 Diabetes",
    ),
    HealthCondition(
        id="heart-disease", type="heart", severity="moderate", label="Heart Disease"
    ),
    HealthCondition(
        id="hypertension",
        type="hypertension",
        severity="moderate",
        label="High Blood Pressure",
    ),
    HealthCondition(
        id="peanut-allergy",
        type="allergy",
        subtype="peanuts",
        severity="severe",
        label="Peanut Allergy",
    ),
    HealthCondition(
        id="gluten-allergy",
        type="allergy",
        subtype="gluten",
        severity="moderate",
        label="Gluten Intolerance",
    ),
)
