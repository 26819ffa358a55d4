"""Pydantic request and response models for the HTTP API."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from food_safety.domain.products import Product
from food_safety.domain.profiles import (
    FamilyMember,
    HealthCondition,
    NutritionGoals,
    Profile,
)
from food_safety.domain.safety import SafetyWarning

ConditionType = Literal["allergy", "diabetes", "heart", "hypertension", "other"]
ConditionSeverity = Literal["mild", "moderate", "severe"]


class HealthConditionPayload(BaseModel):
    """Health condition payload."""

    id: str
    type: ConditionType
    subtype: str | None = None
    severity: ConditionSeverity
    label: str

    def to_domain(self) -> HealthCondition:
        return HealthCondition(
            id=self.id,
            type=self.type,
            label=self.label,
            severity=self.severity,
            subtype=self.subtype,
        )


class FamilyMemberPayload(BaseModel):
    """Family member payload."""

    id: str
    name: str
    relationship: str
    age: int | None = Field(default=None, ge=0, le=120)
    weight: float | None = Field(default=None, ge=0)
    height: float | None = Field(default=None, ge=0)
    conditions: list[HealthConditionPayload] = Field(default_factory=list)
    dietary_preferences: list[str] = Field(default_factory=list)
    include_in_recommendations: bool = True
    avatar_color: str | None = None

    def to_domain(self) -> FamilyMember:
        return FamilyMember(
            id=self.id,
            name=self.name,
            relationship=self.relationship,
            conditions=tuple(c.to_domain() for c in self.conditions),
            include_in_recommendations=self.include_in_recommendations,
            age=self.age,
            weight=self.weight,
            height=self.height,
            dietary_preferences=tuple(self.dietary_preferences),
            avatar_color=self.avatar_color,
        )


class NutritionGoalsPayload(BaseModel):
    """Nutrition goals payload."""

    weight_management: Literal["lose", "maintain", "gain"] = "maintain"
    calorie_target: float | None = Field(default=None, ge=0)
    carbs_pct: float | None = Field(default=None, ge=0, le=100)
    protein_pct: float | None = Field(default=None, ge=0, le=100)
    fats_pct: float | None = Field(default=None, ge=0, le=100)


class ProfilePayload(BaseModel):
    """Profile payload used for saving and for inline evaluation."""

    email: str | None = None
    name: str
    age: int | None = Field(default=None, ge=0, le=120)
    gender: str | None = None
    weight: float | None = Field(default=None, ge=0)
    height: float | None = Field(default=None, ge=0)
    conditions: list[HealthConditionPayload] = Field(default_factory=list)
    dietary_preferences: list[str] = Field(default_factory=list)
    family_members: list[FamilyMemberPayload] = Field(default_factory=list)
    nutrition_goals: NutritionGoalsPayload = Field(
        default_factory=NutritionGoalsPayload
    )

    def to_domain(self) -> Profile:
        return Profile(
            email=self.email,
            name=self.name,
            age=self.age,
            gender=self.gender,
            weight=self.weight,
            height=self.height,
            conditions=tuple(c.to_domain() for c in self.conditions),
            dietary_preferences=tuple(self.dietary_preferences),
            family_members=tuple(m.to_domain() for m in self.family_members),
            nutrition_goals=NutritionGoals(**self.nutrition_goals.model_dump()),
        )


class ProductPayload(BaseModel):
    """Product facts supplied inline by the caller."""

    model_config = ConfigDict(extra="ignore")

    code: str | None = None
    name: str | None = None
    nutrients: dict[str, float | None] = Field(default_factory=dict)
    allergens: list[str] = Field(default_factory=list)
    quantity: str | None = None

    def to_domain(self) -> Product:
        return Product(
            nutrients={k: v for k, v in self.nutrients.items() if v is not None},
            allergens=tuple(self.allergens),
            quantity=self.quantity,
            code=self.code,
            name=self.name,
        )


class ProductResponse(BaseModel):
    """Product returned by lookups."""

    code: str | None
    name: str | None
    brands: str | None
    quantity: str | None
    ingredients_text: str | None
    image_url: str | None
    nutrients: dict[str, float]
    allergens: list[str]

    @classmethod
    def from_domain(cls, product: Product) -> "ProductResponse":
        return cls(
            code=product.code,
            name=product.name,
            brands=product.brands,
            quantity=product.quantity,
            ingredients_text=product.ingredients_text,
            image_url=product.image_url,
            nutrients=dict(product.nutrients),
            allergens=list(product.allergens),
        )


class HealthConditionResponse(BaseModel):
    """Health condition as stored; extension types pass through."""

    id: str
    type: str
    subtype: str | None
    severity: str
    label: str

    @classmethod
    def from_domain(cls, condition: HealthCondition) -> "HealthConditionResponse":
        return cls(
            id=condition.id,
            type=condition.type,
            subtype=condition.subtype,
            severity=condition.severity,
            label=condition.label,
        )


class FamilyMemberResponse(BaseModel):
    """Family member as stored."""

    id: str
    name: str
    relationship: str
    age: int | None
    weight: float | None
    height: float | None
    conditions: list[HealthConditionResponse]
    dietary_preferences: list[str]
    include_in_recommendations: bool
    avatar_color: str | None

    @classmethod
    def from_domain(cls, member: FamilyMember) -> "FamilyMemberResponse":
        return cls(
            id=member.id,
            name=member.name,
            relationship=member.relationship,
            age=member.age,
            weight=member.weight,
            height=member.height,
            conditions=[
                HealthConditionResponse.from_domain(c) for c in member.conditions
            ],
            dietary_preferences=list(member.dietary_preferences),
            include_in_recommendations=member.include_in_recommendations,
            avatar_color=member.avatar_color,
        )


class NutritionGoalsResponse(BaseModel):
    """Nutrition goals as stored."""

    weight_management: str
    calorie_target: float | None
    carbs_pct: float | None
    protein_pct: float | None
    fats_pct: float | None


class ProfileResponse(BaseModel):
    """Stored profile returned to clients.

    Unlike ``ProfilePayload`` this does not re-validate condition types or
    ranges, so anything the store holds can be read back.
    """

    email: str | None
    name: str
    age: int | None
    gender: str | None
    weight: float | None
    height: float | None
    conditions: list[HealthConditionResponse]
    dietary_preferences: list[str]
    family_members: list[FamilyMemberResponse]
    nutrition_goals: NutritionGoalsResponse

    @classmethod
    def from_domain(cls, profile: Profile) -> "ProfileResponse":
        goals = profile.nutrition_goals
        return cls(
            email=profile.email,
            name=profile.name,
            age=profile.age,
            gender=profile.gender,
            weight=profile.weight,
            height=profile.height,
            conditions=[
                HealthConditionResponse.from_domain(c) for c in profile.conditions
            ],
            dietary_preferences=list(profile.dietary_preferences),
            family_members=[
                FamilyMemberResponse.from_domain(m) for m in profile.family_members
            ],
            nutrition_goals=NutritionGoalsResponse(
                weight_management=goals.weight_management,
                calorie_target=goals.calorie_target,
                carbs_pct=goals.carbs_pct,
                protein_pct=goals.protein_pct,
                fats_pct=goals.fats_pct,
            ),
        )


class _ProfileSource(BaseModel):
    profile: ProfilePayload | None = None
    email: str | None = None

    @model_validator(mode="after")
    def require_profile_source(self) -> "_ProfileSource":
        if self.profile is None and not self.email:
            raise ValueError("Either profile or email is required")
        return self


class SafetyCheckRequest(_ProfileSource):
    """Single-product safety check request."""

    product: ProductPayload | None = None
    barcode: str | None = None

    @model_validator(mode="after")
    def require_product_source(self) -> "SafetyCheckRequest":
        if self.product is None and not self.barcode:
            raise ValueError("Either product or barcode is required")
        return self


class CartCheckRequest(_ProfileSource):
    """Cart safety check request."""

    products: list[ProductPayload] = Field(default_factory=list)
    barcodes: list[str] = Field(default_factory=list)


class SubstitutesRequest(_ProfileSource):
    """Substitute suggestion request."""

    product_name: str = Field(min_length=1)


class WarningResponse(BaseModel):
    """A rendered safety warning."""

    message: str
    severity: Literal["high", "medium", "low"]
    person: str
    condition_id: str

    @classmethod
    def from_domain(cls, warning: SafetyWarning) -> "WarningResponse":
        return cls(
            message=warning.message,
            severity=warning.severity,
            person=warning.person,
            condition_id=warning.condition_id,
        )


class SafetyCheckResponse(BaseModel):
    """Ordered warnings for one product."""

    warnings: list[WarningResponse]


class CartCheckResponse(BaseModel):
    """Deduplicated warning messages for a cart."""

    warnings: list[str]


class SubstitutesResponse(BaseModel):
    """Substitute suggestions."""

    product_name: str
    substitutes: list[str]
