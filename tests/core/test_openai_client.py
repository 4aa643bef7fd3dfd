from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from app.core.llm.openai_client import OpenAIClient, OpenAIConfig, OpenAIUpstreamError


def _client(handler) -> OpenAIClient:
    config = OpenAIConfig(
        api_key="sk-test",
        base_url="https://llm.example.test/v1/",
        model="gpt-3.5-turbo",
        timeout_seconds=5.0,
    )
    return OpenAIClient(config=config, transport=httpx.MockTransport(handler))


def _complete(client: OpenAIClient, **kwargs) -> dict:
    return asyncio.run(client.complete(messages=[{"role": "system", "content": "hi"}], **kwargs))


def test_complete_returns_first_choice_message() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "choices": [
                    {"index": 0, "message": {"role": "assistant", "content": "first"}},
                    {"index": 1, "message": {"role": "assistant", "content": "second"}},
                ]
            },
        )

    assert _complete(_client(handler)) == {"role": "assistant", "content": "first"}

    request = seen[0]
    assert str(request.url) == "https://llm.example.test/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer sk-test"
    body = json.loads(request.content)
    assert body == {
        "model": "gpt-3.5-turbo",
        "messages": [{"role": "system", "content": "hi"}],
    }


def test_complete_uses_requested_model() -> None:
    models: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        models.append(json.loads(request.content)["model"])
        return httpx.Response(
            200, json={"choices": [{"message": {"role": "assistant", "content": "x"}}]}
        )

    _complete(_client(handler), model="gpt-4o")
    assert models == ["gpt-4o"]


def test_non_200_raises_upstream_error_without_retry() -> None:
    calls = 0

    def handler(request: httpx.Request) -> httpx.Response:
        nonlocal calls
        calls += 1
        return httpx.Response(429, json={"error": {"message": "rate limited"}})

    with pytest.raises(OpenAIUpstreamError):
        _complete(_client(handler))
    assert calls == 1


@pytest.mark.parametrize("body", [{"choices": []}, {"unexpected": True}, {"choices": [{}]}])
def test_malformed_envelope_raises_upstream_error(body: dict) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=body)

    with pytest.raises(OpenAIUpstreamError):
        _complete(_client(handler))


def test_transport_error_raises_upstream_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(OpenAIUpstreamError, match="LLM request failed"):
        _complete(_client(handler))


def test_timeout_raises_upstream_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(OpenAIUpstreamError, match="timed out"):
        _complete(_client(handler))
