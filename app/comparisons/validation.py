from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from app.comparisons.schemas import ComparisonResult

REQUIRED_KEYS: tuple[str, ...] = (
    "questionId",
    "tag",
    "model",
    "question",
    "answer1",
    "answer2",
    "answer3",
    "better_question",
    "why_better",
    "rating_Answer1",
    "explanation_for_rating1",
    "rating_Answer2",
    "explanation_for_rating2",
    "rating_Answer3",
    "explanation_for_rating3",
)


class ComparisonValidationError(ValueError):
    """Raised when the model's reply is not a usable comparison result."""


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _loads(text: Any) -> Any:
    # NaN and Infinity are Python extensions, not JSON.
    return json.loads(text, parse_constant=_reject_constant)


def is_parsable_json(text: Any) -> bool:
    """True if `text` is any well-formed JSON document (objects, arrays and scalars alike)."""
    try:
        _loads(text)
    except (TypeError, ValueError, RecursionError):
        return False
    return True


def has_required_shape(obj: Any) -> bool:
    """Presence-only check: values are not inspected."""
    if not isinstance(obj, Mapping):
        return False
    return all(key in obj for key in REQUIRED_KEYS)


def missing_keys(obj: Mapping[str, Any]) -> list[str]:
    return [key for key in REQUIRED_KEYS if key not in obj]


def parse_comparison_result(text: Any) -> ComparisonResult:
    if not is_parsable_json(text):
        raise ComparisonValidationError("Incomplete JSON response")

    data = _loads(text)
    if not has_required_shape(data):
        if not isinstance(data, Mapping):
            raise ComparisonValidationError("Invalid response structure: expected a JSON object")
        raise ComparisonValidationError(
            "Invalid response structure: missing " + ", ".join(missing_keys(data))
        )

    # The category is always derived locally, never taken from the model.
    fields = {k: v for k, v in data.items() if k != "result"}
    return ComparisonResult.model_validate(fields)
