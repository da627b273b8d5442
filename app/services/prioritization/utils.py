# brief_prioritization_project/app/services/prioritization/utils.py

from __future__ import annotations

import math
from typing import Any, Mapping, Optional, Sequence

from app.services.prioritization.interfaces import PriorityLabel, ScoreBucket

UNKNOWN_COLOR = "#6b7280"


def is_number(value: Any) -> bool:
    """True for real ints/floats; bools and NaN are not numbers here."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def is_missing(value: Any) -> bool:
    """Missing per the stored-data convention: absent, None, "", 0 or NaN."""
    if value is None or value == "":
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or math.isnan(value)
    return value is False


def value_or(values: Optional[Mapping[str, Any]], key: str, default: float) -> Any:
    if not isinstance(values, Mapping):
        return default
    raw = values.get(key)
    return default if is_missing(raw) else raw


def numeric_or(values: Optional[Mapping[str, Any]], key: str, default: float) -> float:
    """Field value coerced to a number; numeric strings are accepted, anything else is NaN."""
    raw = value_or(values, key, default)
    if is_number(raw):
        return raw
    try:
        return float(raw)
    except (TypeError, ValueError):
        return math.nan


def round_half_up(value: float, digits: int = 2) -> float:
    """Round like JavaScript's Math.round(x * 10**d) / 10**d (halves go up)."""
    if not math.isfinite(value):
        return value
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def clamp(value: Optional[float], min_value: float, max_value: float) -> float:
    """Clamp a possibly None float into [min_value, max_value]. None -> min_value."""
    if value is None:
        return min_value
    return max(min_value, min(max_value, value))


def format_number(value: Any) -> str:
    """Render numbers the way a JSON/JS client shows them (1, 0.25, never 1.0)."""
    if is_number(value) and float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return repr(value)
    return str(value)


def bucket_score(score: float, buckets: Sequence[ScoreBucket], fallback: PriorityLabel) -> PriorityLabel:
    """First bucket (ordered high-to-low) whose threshold the score reaches."""
    for bucket in buckets:
        if score >= bucket.threshold:
            return PriorityLabel(label=bucket.label, color=bucket.color)
    return fallback


def unknown_label() -> PriorityLabel:
    return PriorityLabel(label="Unknown", color=UNKNOWN_COLOR)


__all__ = [
    "UNKNOWN_COLOR",
    "is_number",
    "is_missing",
    "value_or",
    "numeric_or",
    "round_half_up",
    "clamp",
    "format_number",
    "bucket_score",
    "unknown_label",
]
