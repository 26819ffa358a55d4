"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from food_safety.adapters.off_client import ProductClient
from food_safety.config import Settings
from food_safety.containers import AppContainer
from food_safety.domain.profiles import FamilyMember, HealthCondition, Profile
from food_safety.services.cache import InMemoryCache
from food_safety.services.cart import CartAggregator
from food_safety.services.products import ProductService
from food_safety.services.profiles import ProfileRepository, ProfileService
from food_safety.services.safety import SafetyEvaluator
from food_safety.services.substitutes import CompletionClient, SubstituteService

DIABETES = HealthCondition(
    id="diabetes-type2",
    type="diabetes",
    subtype="type2",
    severity="moderate",
    label="Type 2 Diabetes",
)
PEANUT_ALLERGY = HealthCondition(
    id="peanut-allergy",
    type="allergy",
    subtype="peanuts",
    severity="severe",
    label="Peanut Allergy",
)
HYPERTENSION = HealthCondition(
    id="hypertension",
    type="hypertension",
    severity="moderate",
    label="High Blood Pressure",
)
HEART = HealthCondition(
    id="heart-disease", type="heart", severity="moderate", label="Heart Disease"
)


def family_profile(include_sam: bool = True) -> Profile:
    """Primary person with diabetes plus a child with a peanut allergy."""
    return Profile(
        email="alex@example.com",
        name="Alex",
        age=41,
        gender="female",
        conditions=(DIABETES,),
        family_members=(
            FamilyMember(
                id="member-1",
                name="Sam",
                relationship="child",
                age=8,
                conditions=(PEANUT_ALLERGY,),
                include_in_recommendations=include_sam,
            ),
        ),
    )


@dataclass
class InMemoryProfileRepository(ProfileRepository):
    """In-memory profile repository for tests."""

    profiles: dict[str, Profile] = field(default_factory=dict)

    def get_by_email(self, email: str) -> Profile | None:
        return self.profiles.get(email)

    def upsert(self, profile: Profile) -> Profile:
        self.profiles[profile.email or ""] = profile
        return profile


@dataclass
class FakeProductClient(ProductClient):
    """Fake Open Food Facts client with in-memory responses."""

    products: dict[str, dict[str, object]] = field(
        default_factory=lambda: {
            "3017620422003": {
                "code": "3017620422003",
                "product_name": "Nutella",
                "brands": "Ferrero",
                "quantity": "400 g",
                "allergens_tags": ["en:milk", "en:nuts", "en:soybeans"],
                "nutriments": {
                    "sugars_100g": 56.3,
                    "saturated-fat_100g": 10.6,
                    "salt_100g": 0.107,
                    "nutrition-score-fr": "19",
                    "energy_unit": "kcal",
                },
            }
        }
    )
    search_calls: int = 0
    product_calls: int = 0

    async def get_product(self, barcode: str) -> dict[str, object]:
        self.product_calls += 1
        product = self.products.get(barcode)
        if product is None:
            return {"status": 0, "status_verbose": "product not found"}
        return {"status": 1, "code": barcode, "product": product}

    async def search_products(
        self, query: str, page_size: int = 10
    ) -> dict[str, object]:
        self.search_calls += 1
        matches = [
            product
            for product in self.products.values()
            if query.lower() in str(product.get("product_name", "")).lower()
        ]
        return {"count": len(matches), "products": matches[:page_size]}


@dataclass
class FakeCompletionClient(CompletionClient):
    """Fake completion client returning a fixed payload."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "substitutes": ["Sunflower Seed Butter", "Oat Spread", "Pumpkin Seed Spread"]
        }
    )
    prompts: list[str] = field(default_factory=list)

    async def complete(
        self,
        *,
        model: str,
        store: bool,
        prompt: str,
        schema: dict[str, object],
        schema_name: str,
    ) -> dict[str, object]:
        self.prompts.append(prompt)
        return self.payload


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        openai_api_key="openai-key",
    )


@pytest.fixture
def profile_repository() -> InMemoryProfileRepository:
    return InMemoryProfileRepository()


@pytest.fixture
def product_client() -> FakeProductClient:
    return FakeProductClient()


@pytest.fixture
def completion_client() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture
def container(
    settings: Settings,
    profile_repository: InMemoryProfileRepository,
    product_client: FakeProductClient,
    completion_client: FakeCompletionClient,
) -> AppContainer:
    evaluator = SafetyEvaluator()

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        evaluator=evaluator,
        cart_aggregator=CartAggregator(evaluator),
        product_service=ProductService(
            client=product_client, cache=InMemoryCache(), retry_delay_seconds=0
        ),
        profile_service=ProfileService(profile_repository),
        substitute_service=SubstituteService(
            client=completion_client, model=settings.openai_model
        ),
        close_resources=close_resources,
    )
