"""OpenAI Responses API client for nutrition estimation."""

import json
import logging
from dataclasses import dataclass

from openai import AsyncOpenAI

from wellness_log.services.estimation import EstimationClient

SCHEMA_NAME = "meal_estimate"

_logger = logging.getLogger(__name__)


def build_estimate_request(  # noqa: PLR0913
    *,
    model: str,
    reasoning_effort: str | None,
    store: bool,
    prompt: str,
    schema: dict[str, object],
    image_data_url: str | None = None,
) -> dict[str, object]:
    """Build a Responses API request for one meal.

    Text-only requests carry just the prompt; photo requests attach the image
    after it at high detail so portion sizes stay readable.
    """
    content: list[dict[str, str]] = [{"type": "input_text", "text": prompt}]
    if image_data_url is not None:
        content.append(
            {"type": "input_image", "image_url": image_data_url, "detail": "high"}
        )
    request: dict[str, object] = {
        "model": model,
        "input": [{"role": "user", "content": content}],
        "text": {
            "format": {
                "type": "json_schema",
                "name": SCHEMA_NAME,
                "strict": True,
                "schema": schema,
            }
        },
        "store": store,
    }
    if reasoning_effort:
        request["reasoning"] = {"effort": reasoning_effort}
    return request


def parse_estimate_output(output_text: str | None) -> dict[str, object]:
    """Decode the model's JSON estimate, failing on empty or non-object output."""
    if not output_text:
        raise RuntimeError("OpenAI returned an empty estimate")
    try:
        payload = json.loads(output_text)
    except json.JSONDecodeError as exc:
        raise RuntimeError("OpenAI returned an estimate that is not JSON") from exc
    if not isinstance(payload, dict):
        raise RuntimeError("OpenAI returned an estimate that is not an object")
    return payload


@dataclass
class OpenAIEstimationClient(EstimationClient):
    """Estimation client backed by OpenAI Responses API."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIEstimationClient":
        """Create an OpenAI estimation client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def estimate(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
        schema: dict[str, object],
        image_data_url: str | None = None,
    ) -> dict[str, object]:
        """Request a structured meal estimate."""
        request = build_estimate_request(
            model=model,
            reasoning_effort=reasoning_effort,
            store=store,
            prompt=prompt,
            schema=schema,
            image_data_url=image_data_url,
        )
        _logger.info(
            "Requesting %s estimate from %s",
            "photo" if image_data_url is not None else "text",
            model,
        )
        response = await self.client.responses.create(**request)
        return parse_estimate_output(response.output_text)
