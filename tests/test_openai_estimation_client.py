"""Tests for the OpenAI estimation client."""

import asyncio
import json
from dataclasses import dataclass, field

import pytest

from wellness_log.adapters.openai_estimation_client import (
    OpenAIEstimationClient,
    build_estimate_request,
    parse_estimate_output,
)
from wellness_log.services.estimation import ESTIMATE_SCHEMA
from tests.conftest import estimate_payload


@dataclass
class FakeResponse:
    output_text: str


@dataclass
class FakeResponses:
    output_text: str
    requests: list[dict[str, object]] = field(default_factory=list)

    async def create(self, **request: object) -> FakeResponse:
        self.requests.append(request)
        return FakeResponse(output_text=self.output_text)


@dataclass
class FakeAsyncOpenAI:
    responses: FakeResponses


def test_text_request_has_no_image_part() -> None:
    request = build_estimate_request(
        model="gpt-5.2",
        reasoning_effort=None,
        store=False,
        prompt="Estimate toast",
        schema=ESTIMATE_SCHEMA,
    )

    content = request["input"][0]["content"]
    assert content == [{"type": "input_text", "text": "Estimate toast"}]
    assert request["text"]["format"]["name"] == "meal_estimate"
    assert request["text"]["format"]["strict"] is True
    assert "reasoning" not in request


def test_photo_request_attaches_image_after_prompt() -> None:
    request = build_estimate_request(
        model="gpt-5.2",
        reasoning_effort="medium",
        store=False,
        prompt="Estimate this meal",
        schema=ESTIMATE_SCHEMA,
        image_data_url="data:image/png;base64,AAAA",
    )

    content = request["input"][0]["content"]
    assert [part["type"] for part in content] == ["input_text", "input_image"]
    assert content[1]["image_url"] == "data:image/png;base64,AAAA"
    assert request["reasoning"] == {"effort": "medium"}


def test_parse_estimate_output_rejects_bad_output() -> None:
    with pytest.raises(RuntimeError, match="empty"):
        parse_estimate_output("")
    with pytest.raises(RuntimeError, match="not JSON"):
        parse_estimate_output("Sorry, I can't help with that.")
    with pytest.raises(RuntimeError, match="not an object"):
        parse_estimate_output("[1, 2]")


def test_estimate_sends_request_and_decodes_payload() -> None:
    responses = FakeResponses(output_text=json.dumps(estimate_payload()))
    client = OpenAIEstimationClient(client=FakeAsyncOpenAI(responses=responses))

    payload = asyncio.run(
        client.estimate(
            model="gpt-5.2",
            reasoning_effort="medium",
            store=False,
            prompt="Estimate soup",
            schema=ESTIMATE_SCHEMA,
        )
    )

    assert payload["meal_name"] == "Chicken salad"
    assert responses.requests[0]["model"] == "gpt-5.2"
