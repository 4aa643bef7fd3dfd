from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession

from app.comparisons.schemas import (
    ComparisonIn,
    ComparisonOut,
    PromptCompletionOut,
    PromptIn,
    StoredRecordOut,
)
from app.comparisons.service import ComparisonService, complete_prompt, list_results
from app.core.db import get_session
from app.core.llm.deps import get_openai_client

router = APIRouter()

GREETING = "Hello, this is the root of the ChatGPT server."


@router.get("/", response_class=PlainTextResponse, tags=["completions"])
async def root() -> str:
    return GREETING


@router.post("/", response_model=PromptCompletionOut, tags=["completions"])
async def post_prompt(
    body: PromptIn,
    openai_client=Depends(get_openai_client),
) -> PromptCompletionOut:
    """Relay a raw prompt upstream and return the first choice's message."""

    message = await complete_prompt(llm_client=openai_client, message=body.message)
    return PromptCompletionOut(completion=message)


@router.post("/compare", response_model=ComparisonOut, tags=["comparisons"])
async def post_compare(
    body: ComparisonIn,
    session: AsyncSession = Depends(get_session),
    openai_client=Depends(get_openai_client),
) -> ComparisonOut:
    """
    Ask the model to rate three answers to one question, derive the `result`
    category and store the comparison.

    A failed insert is logged only; the response is still 200.
    """

    service = ComparisonService(session=session, llm_client=openai_client)
    result = await service.compare(payload=body.message, model=body.model)
    return ComparisonOut(completion=result)


@router.get("/api/results", response_model=list[StoredRecordOut], tags=["results"])
async def get_results(session: AsyncSession = Depends(get_session)) -> list[StoredRecordOut]:
    return await list_results(session=session)
