# brief_prioritization_project/app/services/prioritization/calculator.py

from __future__ import annotations

from typing import Any, Mapping, Optional

from app.services.prioritization.engines.value_effort import ValueEffortMatrixEngine
from app.services.prioritization.interfaces import CompositeFramework, MatrixFramework, Quadrant
from app.services.prioritization.registry import get_framework

_VALUE_EFFORT_ENGINE = ValueEffortMatrixEngine()


def calculate_priority_score(framework_id: Optional[str], values: Any) -> Any:
    """Comparable score for a priority value under the given framework.

    Composite frameworks compute their formula. Every other framework uses
    the raw `value` entry as the score; a legacy bare scalar is returned as is.
    """
    framework = get_framework(framework_id)

    if isinstance(framework, CompositeFramework):
        return framework.engine.compute(values if isinstance(values, Mapping) else {})

    if isinstance(values, Mapping) and "value" in values:
        return values["value"]

    return values


def get_quadrant(values: Mapping[str, Any], framework_id: str = "value_effort") -> Quadrant:
    """Value vs Effort quadrant for a raw value map."""
    framework = get_framework(framework_id)
    engine = framework.engine if isinstance(framework, MatrixFramework) else _VALUE_EFFORT_ENGINE
    return engine.classify(values if isinstance(values, Mapping) else {})


__all__ = ["calculate_priority_score", "get_quadrant"]
