import json

import httpx
import pytest

from fitcoach.services.ai_coach import (
    WEEKLY_REVIEW_PROMPT,
    AiCoachClient,
    AiCoachError,
    AiNotConfiguredError,
)


def _client(handler, api_key="test-key"):
    return AiCoachClient(
        api_key=api_key,
        api_base="https://llm.test/v1/",
        model="test-model",
        transport=httpx.MockTransport(handler),
    )


def test_posts_chat_completion_and_returns_text():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"choices": [{"message": {"content": "Great week."}}]})

    assert _client(handler).weekly_review("Date range: ...") == "Great week."

    assert seen["url"] == "https://llm.test/v1/chat/completions"
    assert seen["auth"] == "Bearer test-key"
    body = seen["body"]
    assert body["model"] == "test-model"
    assert body["temperature"] == 0.7
    assert body["max_tokens"] == 1500
    assert body["messages"] == [
        {"role": "system", "content": WEEKLY_REVIEW_PROMPT},
        {"role": "user", "content": "Date range: ..."},
    ]


def test_missing_key_fails_before_any_request():
    def handler(request):
        raise AssertionError("no request expected")

    with pytest.raises(AiNotConfiguredError):
        _client(handler, api_key="").meal_plan("x")


def test_upstream_error_status():
    client = _client(lambda request: httpx.Response(429, text="rate limited"))
    with pytest.raises(AiCoachError, match="429"):
        client.workout_plan("x")


def test_empty_completion():
    client = _client(lambda request: httpx.Response(200, json={"choices": []}))
    with pytest.raises(AiCoachError, match="Empty"):
        client.weekly_review("x")


def test_transport_failure():
    def handler(request):
        raise httpx.ConnectError("boom", request=request)

    with pytest.raises(AiCoachError):
        _client(handler).weekly_review("x")
