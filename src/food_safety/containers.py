"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from food_safety.adapters.off_client import HttpxOpenFoodFactsClient
from food_safety.adapters.openai_completion_client import OpenAICompletionClient
from food_safety.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from food_safety.config import Settings
from food_safety.domain.rules import build_registry
from food_safety.services.cache import InMemoryCache
from food_safety.services.cart import CartAggregator
from food_safety.services.products import ProductService
from food_safety.services.profiles import ProfileService
from food_safety.services.safety import SafetyEvaluator
from food_safety.services.substitutes import SubstituteService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    evaluator: SafetyEvaluator
    cart_aggregator: CartAggregator
    product_service: ProductService
    profile_service: ProfileService
    substitute_service: SubstituteService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    evaluator = SafetyEvaluator(build_registry(resolved_settings.high_threshold_ratio))
    off_client = HttpxOpenFoodFactsClient.create(
        base_url=resolved_settings.off_base_url,
        user_agent=resolved_settings.off_user_agent,
    )
    product_service = ProductService(
        client=off_client,
        cache=InMemoryCache(),
        search_ttl_seconds=resolved_settings.search_cache_ttl_seconds,
        product_ttl_seconds=resolved_settings.product_cache_ttl_seconds,
        debug=resolved_settings.debug,
    )
    completion_client = OpenAICompletionClient.create(resolved_settings.openai_api_key)
    substitute_service = SubstituteService(
        client=completion_client,
        model=resolved_settings.openai_model,
        store=resolved_settings.openai_store,
    )

    async def close_resources() -> None:
        await off_client.close()
        await completion_client.close()

    return AppContainer(
        settings=resolved_settings,
        evaluator=evaluator,
        cart_aggregator=CartAggregator(evaluator),
        product_service=product_service,
        profile_service=ProfileService(SupabaseProfileRepository(supabase_client)),
        substitute_service=substitute_service,
        close_resources=close_resources,
    )
