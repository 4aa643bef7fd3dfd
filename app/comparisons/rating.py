from __future__ import annotations

import math
from typing import Any

from app.comparisons.schemas import ComparisonCategory

_INFINITIES = {"Infinity": math.inf, "+Infinity": math.inf, "-Infinity": -math.inf}


def _as_number(value: Any) -> float:
    """Numeric value of a rating, NaN when it has none.

    Follows JavaScript number coercion for the values a JSON reply can carry:
    null is 0, booleans are 0/1, blank strings are 0.
    """

    if value is None:
        return 0.0
    if isinstance(value, (bool, int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.copysign(math.inf, value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if text in _INFINITIES:
            return _INFINITIES[text]
        # float() also accepts "nan", "inf" and digit underscores; JSON replies don't mean those.
        if "_" in text or text.lstrip("+-")[:3].lower() in ("nan", "inf"):
            return math.nan
        try:
            return float(text)
        except ValueError:
            return math.nan
    return math.nan


def _ge(a: Any, b: Any) -> bool:
    if isinstance(a, str) and isinstance(b, str):
        return a >= b
    if isinstance(a, (int, float)) and isinstance(b, (int, float)):
        return a >= b
    # NaN compares false against everything.
    return _as_number(a) >= _as_number(b)


def classify(r1: Any, r2: Any, r3: Any) -> ComparisonCategory | None:
    """
    Derive a coarse label from the ratings of the max-score, closest and
    min-score answers.

    "good" means the model agrees with the community ordering. Branches are
    evaluated in order and ties go to the first branch that matches, so this
    is not equivalent to sorting the ratings. Two string ratings compare
    lexicographically; any other pair compares numerically. A rating with no
    numeric value makes its comparisons false, which can leave the result None.
    """

    if _ge(r1, r2) and _ge(r2, r3):
        return "good"
    if (_ge(r1, r3) and _ge(r3, r2)) or (_ge(r2, r1) and _ge(r1, r3)) or (
        _ge(r3, r2) and _ge(r2, r1)
    ):
        return "mid"
    if (_ge(r3, r1) and _ge(r1, r2)) or (_ge(r2, r3) and _ge(r3, r1)):
        return "bad"
    return None
