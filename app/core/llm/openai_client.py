from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import httpx


class OpenAIError(Exception):
    """Base error for completion client failures."""


class OpenAIUpstreamError(OpenAIError):
    """Raised when the OpenAI API fails or returns an unexpected response."""


@dataclass(frozen=True)
class OpenAIConfig:
    api_key: str
    base_url: str
    model: str
    timeout_seconds: float


class OpenAIClient:
    """
    Thin chat-completions client.

    - One request per call, no retries, no caching.
    - Returns the first choice's message ({"role", "content"}) untouched; callers
      decide whether the content is JSON.
    - No logging here (prompts are large and carry third-party content).
    """

    def __init__(
        self,
        *,
        config: OpenAIConfig,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._config = config
        self._transport = transport

    @property
    def default_model(self) -> str:
        return self._config.model

    async def complete(
        self, *, messages: list[dict[str, str]], model: str | None = None
    ) -> dict[str, Any]:
        url = f"{self._config.base_url.rstrip('/')}/chat/completions"
        headers = {
            "Authorization": f"Bearer {self._config.api_key}",
            "Content-Type": "application/json",
        }
        payload: dict[str, Any] = {
            "model": model or self._config.model,
            "messages": messages,
        }

        try:
            async with httpx.AsyncClient(
                timeout=self._config.timeout_seconds, transport=self._transport
            ) as client:
                resp = await client.post(url, headers=headers, json=payload)
        except httpx.TimeoutException as exc:
            raise OpenAIUpstreamError("LLM request timed out") from exc
        except httpx.HTTPError as exc:
            raise OpenAIUpstreamError("LLM request failed") from exc

        if resp.status_code != 200:
            raise OpenAIUpstreamError(f"LLM service returned HTTP {resp.status_code}")

        try:
            message = resp.json()["choices"][0]["message"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise OpenAIUpstreamError("LLM response envelope was malformed") from exc

        if not isinstance(message, dict):
            raise OpenAIUpstreamError("LLM response message must be an object")

        return {"role": message.get("role", "assistant"), "content": message.get("content")}
