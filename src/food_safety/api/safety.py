"""Safety check endpoints."""

from fastapi import APIRouter, Depends

from food_safety.api.deps import get_container, resolve_profile
from food_safety.api.schemas import (
    CartCheckRequest,
    CartCheckResponse,
    SafetyCheckRequest,
    SafetyCheckResponse,
    WarningResponse,
)
from food_safety.containers import AppContainer

router = APIRouter(prefix="/safety", tags=["safety"])


@router.post("/check")
async def check_product(
    body: SafetyCheckRequest, container: AppContainer = Depends(get_container)
) -> SafetyCheckResponse:
    """Return ordered warnings for one product."""
    profile = resolve_profile(container, body.profile, body.email)
    if body.product is not None:
        product = body.product.to_domain()
    else:
        product = await container.product_service.get_product(body.barcode or "")
    warnings = container.evaluator.evaluate(product, profile)
    return SafetyCheckResponse(
        warnings=[WarningResponse.from_domain(w) for w in warnings]
    )


@router.post("/cart")
async def check_cart(
    body: CartCheckRequest, container: AppContainer = Depends(get_container)
) -> CartCheckResponse:
    """Return deduplicated warnings across a cart."""
    profile = resolve_profile(container, body.profile, body.email)
    products = [payload.to_domain() for payload in body.products]
    if body.barcodes:
        products.extend(await container.product_service.get_products(body.barcodes))
    return CartCheckResponse(
        warnings=container.cart_aggregator.aggregate(products, profile)
    )
