"""Unit tests for the Gemini text provider."""

from __future__ import annotations

import json

import httpx
import pytest

from config.text import FALLBACK_TEXT, STUDY_ERROR_ANSWER, STUDY_ERROR_QUESTION
from core.exceptions import ProviderError, ValidationError
from core.providers.text.gemini import GeminiTextProvider
from core.pydantic_schemas import Source
from tests.helpers import candidate_payload, sequence

URL = "https://example.test/v1beta/models/gemini-test:generateContent"


def _provider(make_http_client, *responses):
    client, mock = make_http_client(sequence(*responses))
    return GeminiTextProvider(client, url=URL, model="gemini-test"), mock


def _json(payload) -> httpx.Response:
    return httpx.Response(200, json=payload)


@pytest.mark.anyio("asyncio")
async def test_generate_returns_text_and_grounding_sources(make_http_client):
    payload = candidate_payload(
        "Paris is the capital of France.",
        groundingMetadata={
            "groundingAttributions": [
                {"web": {"uri": "https://a.example", "title": "A"}},
                {"web": {"uri": "https://b.example"}},
                {"web": {"uri": "https://c.example", "title": "C"}},
            ]
        },
    )
    provider, mock = _provider(make_http_client, _json(payload))

    result = await provider.generate("Capital of France?", "Be brief", use_grounding=True, temperature=0.2)

    assert result.text == "Paris is the capital of France."
    assert result.sources == [
        Source(uri="https://a.example", title="A"),
        Source(uri="https://c.example", title="C"),
    ]
    assert result.is_fallback is False
    assert result.model == "gemini-test"

    body = json.loads(mock.requests[0].content)
    assert body["contents"] == [{"parts": [{"text": "Capital of France?"}]}]
    assert body["systemInstruction"] == {"parts": [{"text": "Be brief"}]}
    assert body["tools"] == [{"google_search": {}}]
    assert body["generationConfig"] == {"temperature": 0.2}


@pytest.mark.anyio("asyncio")
async def test_generate_without_grounding_omits_tools(make_http_client):
    provider, mock = _provider(make_http_client, _json(candidate_payload("hello")))

    result = await provider.generate("hi")

    body = json.loads(mock.requests[0].content)
    assert "tools" not in body
    assert "systemInstruction" not in body
    assert "generationConfig" not in body
    assert result.sources == []


@pytest.mark.anyio("asyncio")
async def test_generate_falls_back_when_candidates_missing(make_http_client):
    provider, _ = _provider(make_http_client, _json({"promptFeedback": {"blockReason": "SAFETY"}}))

    result = await provider.generate("something risky")

    assert result.text == FALLBACK_TEXT
    assert result.is_fallback is True
    assert result.sources == []


@pytest.mark.anyio("asyncio")
async def test_generate_rejects_empty_prompt_without_calling_api(make_http_client):
    provider, mock = _provider(make_http_client, _json(candidate_payload("unused")))

    with pytest.raises(ValidationError):
        await provider.generate("   ")

    assert mock.requests == []


@pytest.mark.anyio("asyncio")
async def test_generate_propagates_provider_errors(make_http_client):
    provider, _ = _provider(make_http_client, httpx.Response(503, text="unavailable"))

    with pytest.raises(ProviderError) as excinfo:
        await provider.generate("hi")

    assert excinfo.value.status_code == 503


@pytest.mark.anyio("asyncio")
async def test_generate_structured_parses_items(make_http_client):
    items = [
        {"type": "flashcard", "question": "H2O?", "answer": "Water"},
        {
            "type": "quiz",
            "question": "2+2?",
            "answer": "4",
            "options": ["3", "4", "5", "22"],
        },
    ]
    provider, mock = _provider(make_http_client, _json(candidate_payload(json.dumps(items))))

    result = await provider.generate_structured("Chemistry basics", "Study assistant")

    assert [item.type for item in result] == ["flashcard", "quiz"]
    assert result[1].options == ["3", "4", "5", "22"]
    assert result[0].options is None

    body = json.loads(mock.requests[0].content)
    config = body["generationConfig"]
    assert config["responseMimeType"] == "application/json"
    assert config["responseSchema"]["type"] == "ARRAY"
    assert "tools" not in body


@pytest.mark.anyio("asyncio")
async def test_generate_structured_wraps_single_object(make_http_client):
    item = {"type": "flashcard", "question": "Q", "answer": "A"}
    provider, _ = _provider(make_http_client, _json(candidate_payload(json.dumps(item))))

    result = await provider.generate_structured("topic")

    assert len(result) == 1
    assert result[0].question == "Q"


@pytest.mark.parametrize(
    "response_payload",
    [
        candidate_payload("this is not json"),
        candidate_payload(json.dumps([{"type": "flashcard", "question": "missing answer"}])),
        candidate_payload(None),
        {},
    ],
    ids=["invalid-json", "wrong-shape", "no-text", "no-candidates"],
)
@pytest.mark.anyio("asyncio")
async def test_generate_structured_returns_error_item_on_bad_output(make_http_client, response_payload):
    provider, _ = _provider(make_http_client, _json(response_payload))

    result = await provider.generate_structured("topic")

    assert len(result) == 1
    assert result[0].type == "error"
    assert result[0].is_error
    assert result[0].question == STUDY_ERROR_QUESTION
    assert result[0].answer == STUDY_ERROR_ANSWER
