"""Product lookups backed by Open Food Facts."""

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from food_safety.adapters.off_client import ProductClient
from food_safety.domain.products import Product
from food_safety.errors import ProductNotFoundError, UpstreamError
from food_safety.services.cache import Cache

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


@dataclass
class ProductService:
    """Service for product lookups with caching."""

    client: ProductClient
    cache: Cache
    search_ttl_seconds: int = 3600
    product_ttl_seconds: int = 86400
    debug: bool = False
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def search(self, query: str, limit: int = 10) -> list[Product]:
        """Search products by name with caching."""
        cache_key = f"off:search:{query.strip().lower()}:{limit}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        payload = await self._call_with_retry(
            lambda: self.client.search_products(query, page_size=limit),
            action="search",
        )
        raw_products = payload.get("products") or []
        products = [
            product_from_payload(raw)
            for raw in raw_products[:limit]
            if isinstance(raw, dict)
        ]
        self.cache.set(cache_key, products, ttl_seconds=self.search_ttl_seconds)
        if self.debug:
            _logger.info("Product search: query=%s results=%s", query, len(products))
        return products

    async def get_product(self, barcode: str) -> Product:
        """Return the product for a barcode."""
        barcode = barcode.strip()
        cache_key = f"off:product:{barcode}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, Product):
            return cached

        payload = await self._call_with_retry(
            lambda: self.client.get_product(barcode),
            action=f"get_product:{barcode}",
        )
        raw = payload.get("product")
        if payload.get("status") != 1 or not isinstance(raw, dict):
            raise ProductNotFoundError(barcode)
        product = product_from_payload(raw, code=barcode)
        self.cache.set(cache_key, product, ttl_seconds=self.product_ttl_seconds)
        if self.debug:
            _logger.info("Product lookup: barcode=%s", barcode)
        return product

    async def get_products(self, barcodes: list[str]) -> list[Product]:
        """Return products for several barcodes, preserving order."""
        return list(
            await asyncio.gather(*(self.get_product(code) for code in barcodes))
        )

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        """Call an async function with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                status_code = _status_code_from_exception(exc)
                if self.debug:
                    _logger.warning(
                        "Product %s failed (attempt %s/%s, status=%s): %s",
                        action,
                        attempt,
                        self.retry_attempts + 1,
                        status_code,
                        exc,
                    )
                if attempt > self.retry_attempts:
                    raise UpstreamError(
                        f"Product catalog {action} failed (status={status_code})"
                    ) from exc
                await asyncio.sleep(self.retry_delay_seconds)


def product_from_payload(raw: dict[str, object], code: str | None = None) -> Product:
    """Normalize an Open Food Facts product payload into a Product."""
    nutriments = raw.get("nutriments") or {}
    nutrients: dict[str, float] = {}
    if isinstance(nutriments, dict):
        for key, value in nutriments.items():
            number = _to_float(value)
            if number is not None:
                nutrients[str(key)] = number
    tags = raw.get("allergens_tags") or []
    allergens = tuple(str(tag) for tag in tags if tag) if isinstance(tags, list) else ()
    return Product(
        nutrients=nutrients,
        allergens=allergens,
        quantity=_optional_str(raw.get("quantity")),
        code=code or _optional_str(raw.get("code")),
        name=_optional_str(raw.get("product_name") or raw.get("product_name_en")),
        brands=_optional_str(raw.get("brands")),
        ingredients_text=_optional_str(raw.get("ingredients_text")),
        image_url=_optional_str(raw.get("image_url")),
    )


def _to_float(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return None
    return None


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"
