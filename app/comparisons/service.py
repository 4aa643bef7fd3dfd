from __future__ import annotations

import json
import logging
from typing import Any, Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.comparisons.models import GptResponse
from app.comparisons.prompt import build_comparison_prompt
from app.comparisons.rating import classify
from app.comparisons.schemas import (
    ComparisonResult,
    CompletionMessage,
    QAPayload,
    StoredRecordOut,
)
from app.comparisons.validation import parse_comparison_result
from app.core.metrics import comparison_persistence_failures_total, record_comparison_result
from app.domain.exceptions import CompletionRequestError, ResultsFetchError

logger = logging.getLogger("app.comparisons")


class LLMClient(Protocol):
    async def complete(
        self, *, messages: list[dict[str, str]], model: str | None = None
    ) -> dict[str, Any]: ...


def _to_int(value: Any) -> int | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(float(str(value).strip()))
    except (ValueError, OverflowError):
        # Non-numeric, NaN or infinite ratings are stored as NULL.
        return None


def _to_text(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def _record_to_row(record: ComparisonResult) -> GptResponse:
    return GptResponse(
        questionId=_to_text(record.questionId),
        tag=_to_text(record.tag),
        model=_to_text(record.model),
        fullMessage=_to_text(record.question),
        answer1=_to_text(record.answer1),
        ratingAnswer1=_to_int(record.rating_Answer1),
        explanationForRating1=_to_text(record.explanation_for_rating1),
        answer2=_to_text(record.answer2),
        ratingAnswer2=_to_int(record.rating_Answer2),
        explanationForRating2=_to_text(record.explanation_for_rating2),
        answer3=_to_text(record.answer3),
        ratingAnswer3=_to_int(record.rating_Answer3),
        explanationForRating3=_to_text(record.explanation_for_rating3),
        result=record.result,
    )


async def _rollback_quietly(session: AsyncSession) -> None:
    try:
        await session.rollback()
    except Exception:  # noqa: BLE001
        logger.warning("Rollback after failed insert also failed", exc_info=True)


async def insert_comparison(
    *, session: AsyncSession, record: ComparisonResult
) -> GptResponse | None:
    """
    Insert one row into gpt_responses.

    Failures are logged and swallowed: the caller still reports success to the
    client even though the row was not written.
    """

    log_extra = {"model": _to_text(record.model), "result": record.result}
    try:
        row = _record_to_row(record)
        session.add(row)
        await session.commit()
    except Exception:  # noqa: BLE001 - persistence never fails the request
        await _rollback_quietly(session)
        comparison_persistence_failures_total.inc()
        logger.exception("Failed to persist comparison result", extra=log_extra)
        return None

    logger.info("Comparison result persisted", extra=log_extra)
    return row


async def list_results(*, session: AsyncSession) -> list[StoredRecordOut]:
    stmt = select(GptResponse).order_by(GptResponse.id.asc())
    try:
        rows = (await session.execute(stmt)).scalars().all()
        return [StoredRecordOut.model_validate(row) for row in rows]
    except Exception as exc:  # noqa: BLE001
        raise ResultsFetchError(details=str(exc)) from exc


async def complete_prompt(*, llm_client: LLMClient | None, message: str) -> CompletionMessage:
    if llm_client is None:
        raise CompletionRequestError()

    try:
        completion = await llm_client.complete(messages=[{"role": "system", "content": message}])
        return CompletionMessage.model_validate(completion)
    except Exception as exc:  # noqa: BLE001 - any failure maps to the generic 500
        raise CompletionRequestError() from exc


class ComparisonService:
    def __init__(self, *, session: AsyncSession, llm_client: LLMClient | None):
        self._session = session
        self._llm = llm_client

    async def compare(self, *, payload: QAPayload, model: str) -> ComparisonResult:
        if self._llm is None:
            raise CompletionRequestError()

        try:
            prompt = build_comparison_prompt(payload, model)
            completion = await self._llm.complete(
                messages=[{"role": "system", "content": prompt}], model=model
            )
            result = parse_comparison_result(completion.get("content"))
            result.result = classify(
                result.rating_Answer1, result.rating_Answer2, result.rating_Answer3
            )
        except Exception as exc:  # noqa: BLE001 - upstream or malformed output maps to 500
            raise CompletionRequestError() from exc

        record_comparison_result(result.result)
        await insert_comparison(session=self._session, record=result)
        return result
