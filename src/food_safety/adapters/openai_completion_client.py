"""OpenAI Responses API client for structured text completions."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI

from food_safety.services.substitutes import CompletionClient


@dataclass
class OpenAICompletionClient(CompletionClient):
    """Completion client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAICompletionClient":
        """Create an OpenAI completion client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def complete(
        self,
        *,
        model: str,
        store: bool,
        prompt: str,
        schema: dict[str, object],
        schema_name: str,
    ) -> dict[str, object]:
        """Call OpenAI Responses API with structured outputs."""
        response = await self.client.responses.create(
            model=model,
            input=[
                {
                    "role": "user",
                    "content": [{"type": "input_text", "text": prompt}],
                }
            ],
            text={
                "format": {
                    "type": "json_schema",
                    "name": schema_name,
                    "strict": True,
                    "schema": schema,
                }
            },
            store=store,
        )
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return json.loads(output_text)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.client.close()
