"""HTTP tests for the AI suggestion endpoint."""

from unittest.mock import AsyncMock

from clarify.ai.http import CompletionAPIError
from clarify.ai.parser import SuggestionParseError
from clarify.core.exceptions import ConfigurationError
from clarify.core.schemas import SuggestionPayload

SUGGEST = "/api/v1/ai/suggest"
REQUEST = {"decisionTitle": "Commute", "description": "", "options": ["Car", "Bike"]}


def _generator(result=None, error=None):
    generator = AsyncMock()
    if error is not None:
        generator.suggest = AsyncMock(side_effect=error)
    else:
        generator.suggest = AsyncMock(return_value=result)
    return generator


async def test_suggest_returns_generated_payload(client, override_generator):
    payload = SuggestionPayload.model_validate({
        "criteria": [{"name": "Cost", "weight": 4}],
        "evaluations": [
            {
                "optionName": "Car",
                "criteriaName": "Cost",
                "pros": [{"text": "Fast", "impactScore": 3}],
                "cons": [],
            }
        ],
    })
    generator = _generator(result=payload)
    override_generator(generator)

    resp = await client.post(SUGGEST, json=REQUEST)

    assert resp.status_code == 200
    body = resp.json()
    assert body["success"] is True
    assert body["generated"]["evaluations"][0]["optionName"] == "Car"
    assert body["generated"]["evaluations"][0]["pros"][0]["impactScore"] == 3
    generator.suggest.assert_awaited_once_with("Commute", "", ["Car", "Bike"])


async def test_suggest_requires_options(client, override_generator):
    override_generator(_generator(result=None))

    resp = await client.post(SUGGEST, json={"decisionTitle": "Commute", "options": []})

    assert resp.status_code == 422


async def test_parse_failure_returns_raw_text(client, override_generator):
    override_generator(
        _generator(error=SuggestionParseError("AI response format invalid", "oops", "oops"))
    )

    resp = await client.post(SUGGEST, json=REQUEST)

    assert resp.status_code == 502
    assert resp.json() == {
        "detail": "AI response format invalid",
        "raw": "oops",
        "extracted": "oops",
    }


async def test_backend_failure(client, override_generator):
    override_generator(_generator(error=CompletionAPIError("POST failed", status_code=503)))

    resp = await client.post(SUGGEST, json=REQUEST)

    assert resp.status_code == 502


async def test_missing_api_key(client, override_generator):
    override_generator(_generator(error=ConfigurationError("AI API key is not configured")))

    resp = await client.post(SUGGEST, json=REQUEST)

    assert resp.status_code == 500
    assert resp.json()["detail"] == "AI API key is not configured"
