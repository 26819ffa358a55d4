"""Open Food Facts API client."""

from dataclasses import dataclass
from typing import Protocol

import httpx


class ProductClient(Protocol):
    """Interface for product catalog lookups."""

    async def get_product(self, barcode: str) -> dict[str, object]:
        """Fetch a product by barcode and return raw API data."""

    async def search_products(
        self, query: str, page_size: int = 10
    ) -> dict[str, object]:
        """Search products by free-text name and return raw API data."""


@dataclass
class HttpxOpenFoodFactsClient(ProductClient):
    """HTTPX-backed Open Food Facts client."""

    base_url: str
    user_agent: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, base_url: str, user_agent: str) -> "HttpxOpenFoodFactsClient":
        """Create a client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            user_agent=user_agent,
            http_client=httpx.AsyncClient(),
        )

    async def get_product(self, barcode: str) -> dict[str, object]:
        """Fetch a product by barcode."""
        url = f"{self.base_url}/api/v0/product/{barcode}.json"
        response = await self.http_client.get(
            url,
            params={"lc": "en"},
            headers={"User-Agent": self.user_agent},
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def search_products(
        self, query: str, page_size: int = 10
    ) -> dict[str, object]:
        """Search products by name."""
        url = f"{self.base_url}/cgi/search.pl"
        response = await self.http_client.get(
            url,
            params={
                "search_terms": query,
                "search_simple": 1,
                "action": "process",
                "json": 1,
                "lc": "en",
                "page_size": page_size,
            },
            headers={"User-Agent": self.user_agent},
            timeout=15,
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
