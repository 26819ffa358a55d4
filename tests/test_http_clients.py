"""Tests for HTTP-based adapters."""

import asyncio
import json

import httpx
import pytest

from food_safety.adapters.off_client import HttpxOpenFoodFactsClient
from food_safety.adapters.openai_completion_client import OpenAICompletionClient


class _FakeResponses:
    def __init__(self) -> None:
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        return type(
            "Resp", (), {"output_text": json.dumps({"substitutes": ["Oat Spread"]})}
        )()


class _FakeOpenAI:
    def __init__(self) -> None:
        self.responses = _FakeResponses()


def test_openai_completion_client_parses_output() -> None:
    fake = _FakeOpenAI()
    client = OpenAICompletionClient(client=fake)

    result = asyncio.run(
        client.complete(
            model="gpt-4o-mini",
            store=False,
            prompt="Suggest",
            schema={"type": "object"},
            schema_name="substitutes",
        )
    )

    assert result == {"substitutes": ["Oat Spread"]}
    assert fake.responses.last_payload is not None
    assert fake.responses.last_payload["text"]["format"]["name"] == "substitutes"


def test_off_client_get_product() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/api/v0/product/3017620422003.json"
        assert request.url.params["lc"] == "en"
        assert request.headers["User-Agent"] == "tests"
        return httpx.Response(200, json={"status": 1, "product": {}})

    transport = httpx.MockTransport(handler)
    client = HttpxOpenFoodFactsClient(
        base_url="https://off.test",
        user_agent="tests",
        http_client=httpx.AsyncClient(transport=transport),
    )

    payload = asyncio.run(client.get_product("3017620422003"))

    assert payload == {"status": 1, "product": {}}


def test_off_client_search_products() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/cgi/search.pl"
        assert request.url.params["search_terms"] == "peanut butter"
        assert request.url.params["json"] == "1"
        assert request.url.params["page_size"] == "3"
        return httpx.Response(200, json={"products": []})

    transport = httpx.MockTransport(handler)
    client = HttpxOpenFoodFactsClient(
        base_url="https://off.test",
        user_agent="tests",
        http_client=httpx.AsyncClient(transport=transport),
    )

    payload = asyncio.run(client.search_products("peanut butter", page_size=3))

    assert payload == {"products": []}


def test_off_client_raises_on_error_status() -> None:
    transport = httpx.MockTransport(lambda request: httpx.Response(503))
    client = HttpxOpenFoodFactsClient(
        base_url="https://off.test",
        user_agent="tests",
        http_client=httpx.AsyncClient(transport=transport),
    )

    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        asyncio.run(client.get_product("1"))

    assert exc_info.value.response.status_code == 503
