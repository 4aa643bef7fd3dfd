"""Stand-ins for the completion client used across endpoint tests."""

from __future__ import annotations

import json
from typing import Any

from app.core.llm.openai_client import OpenAIUpstreamError

QA_PAYLOAD: dict[str, Any] = {
    "QuestionId": 231767,
    "QuestionTitle": "What does the yield keyword do?",
    "QuestionText": "What is the use of the yield keyword in Python?",
    "Tag": "python",
    "MaxScoreAnswerContent": "yield turns a function into a generator.",
    "ClosestAnswerContent": "It is like return but keeps state.",
    "MinScoreAnswerContent": "Use a list instead.",
}


def comparison_reply(*, ratings: tuple[Any, Any, Any] = (8, 6, 4), **overrides: Any) -> dict:
    reply: dict[str, Any] = {
        "questionId": "231767",
        "question": "What does the yield keyword do?, What is the use of the yield keyword in Python?",
        "tag": "python",
        "model": "gpt-4o-mini",
        "answer1": QA_PAYLOAD["MaxScoreAnswerContent"],
        "answer2": QA_PAYLOAD["ClosestAnswerContent"],
        "answer3": QA_PAYLOAD["MinScoreAnswerContent"],
        "better_question": "1",
        "why_better": "It explains generators precisely.",
        "rating_Answer1": ratings[0],
        "explanation_for_rating1": "Accurate and complete.",
        "rating_Answer2": ratings[1],
        "explanation_for_rating2": "Partially correct.",
        "rating_Answer3": ratings[2],
        "explanation_for_rating3": "Does not address the question.",
    }
    reply.update(overrides)
    return reply


class FakeOpenAIClient:
    """Returns a fixed message content and records every call."""

    def __init__(self, content: str | None = None):
        self.content = content if content is not None else json.dumps(comparison_reply())
        self.calls: list[dict[str, Any]] = []

    async def complete(
        self, *, messages: list[dict[str, str]], model: str | None = None
    ) -> dict[str, Any]:
        self.calls.append({"messages": messages, "model": model})
        return {"role": "assistant", "content": self.content}


class FailingOpenAIClient:
    async def complete(
        self, *, messages: list[dict[str, str]], model: str | None = None
    ) -> dict[str, Any]:
        raise OpenAIUpstreamError("upstream failed")


class BrokenOpenAIClient:
    """Fails with an error that is not an OpenAI client error."""

    async def complete(
        self, *, messages: list[dict[str, str]], model: str | None = None
    ) -> dict[str, Any]:
        raise RuntimeError("client bug")
