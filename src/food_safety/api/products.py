"""Product lookup endpoints."""

from fastapi import APIRouter, Depends, Query

from food_safety.api.deps import get_container, resolve_profile
from food_safety.api.schemas import (
    ProductResponse,
    SubstitutesRequest,
    SubstitutesResponse,
)
from food_safety.containers import AppContainer

router = APIRouter(prefix="/products", tags=["products"])


@router.get("/search")
async def search_products(
    q: str = Query(min_length=1),
    limit: int = Query(default=10, ge=1, le=50),
    container: AppContainer = Depends(get_container),
) -> dict[str, list[ProductResponse]]:
    """Search the product catalog by name."""
    products = await container.product_service.search(q, limit=limit)
    return {"products": [ProductResponse.from_domain(p) for p in products]}


@router.post("/substitutes")
async def suggest_substitutes(
    body: SubstitutesRequest, container: AppContainer = Depends(get_container)
) -> SubstitutesResponse:
    """Suggest safer alternatives for the profile's roster."""
    profile = resolve_profile(container, body.profile, body.email)
    suggestions = await container.substitute_service.suggest(
        body.product_name, profile
    )
    return SubstitutesResponse(
        product_name=suggestions.product_name,
        substitutes=suggestions.substitutes,
    )


@router.get("/{barcode}")
async def get_product(
    barcode: str, container: AppContainer = Depends(get_container)
) -> ProductResponse:
    """Return a product by barcode."""
    product = await container.product_service.get_product(barcode)
    return ProductResponse.from_domain(product)
