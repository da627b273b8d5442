# brief_prioritization_project/app/services/prioritization/formatter.py

from __future__ import annotations

from typing import Any, Mapping, Optional

from app.services.prioritization.calculator import calculate_priority_score
from app.services.prioritization.interfaces import (
    CompositeFramework,
    MatrixFramework,
    PriorityDisplay,
    PriorityLabel,
    ScaleFramework,
)
from app.services.prioritization.registry import get_framework
from app.services.prioritization.utils import format_number, is_number, unknown_label


def get_priority_label(framework_id: Optional[str], score_or_values: Any) -> PriorityLabel:
    """Label and colors for a stored value (or a bare score); never raises.

    Unmatched values render as "Unknown" so legacy or malformed data still displays.
    """
    framework = get_framework(framework_id)

    if isinstance(framework, CompositeFramework):
        if isinstance(score_or_values, Mapping):
            score = calculate_priority_score(framework.id, score_or_values)
        elif is_number(score_or_values):
            score = score_or_values
        else:
            return unknown_label()
        return framework.engine.label_for(score)

    if isinstance(framework, MatrixFramework):
        if not isinstance(score_or_values, Mapping):
            return unknown_label()
        quadrant = framework.engine.classify(score_or_values)
        return PriorityLabel(label=quadrant.label, color=quadrant.color, rank=quadrant.rank)

    if isinstance(framework, ScaleFramework):
        if isinstance(score_or_values, Mapping):
            value = score_or_values.get("value")
        else:
            value = score_or_values
        match = framework.option_for(value)
        if match is not None:
            return PriorityLabel(
                label=match.label,
                color=match.color,
                bg_color=match.bg_color,
                border_color=match.border_color,
            )

    return unknown_label()


def format_priority_display(framework_id: Optional[str], score_or_values: Any) -> PriorityDisplay:
    """Label plus display text; composite frameworks show the score, e.g. "High (560)"."""
    framework = get_framework(framework_id)
    label = get_priority_label(framework.id, score_or_values)

    if isinstance(framework, CompositeFramework):
        if isinstance(score_or_values, Mapping):
            score = calculate_priority_score(framework.id, score_or_values)
        else:
            score = score_or_values
        return PriorityDisplay(
            **label.model_dump(),
            display_text=f"{label.label} ({format_number(score)})",
            score=score,
        )

    if isinstance(score_or_values, Mapping):
        score = score_or_values.get("value")
    else:
        score = score_or_values
    return PriorityDisplay(**label.model_dump(), display_text=label.label, score=score)


__all__ = ["get_priority_label", "format_priority_display"]
