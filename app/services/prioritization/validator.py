# brief_prioritization_project/app/services/prioritization/validator.py

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from app.services.prioritization.interfaces import (
    FIELDED_FRAMEWORKS,
    FieldSpec,
    ScaleFramework,
    ValidPriorityValue,
)
from app.services.prioritization.registry import get_framework
from app.services.prioritization.utils import format_number, is_number


class PriorityValidationError(ValueError):
    """Raised when a priority value is incomplete or out of range for its framework."""

    def __init__(self, framework_id: str, errors: List[str]):
        self.framework_id = framework_id
        self.errors = list(errors)
        super().__init__(f"Invalid priority for {framework_id}: {'; '.join(self.errors)}")


def _field_errors(field: FieldSpec, value: Any) -> List[str]:
    if value is None or value == "":
        return [f"{field.label} is required"]
    if not is_number(value):
        return [f"{field.label} must be a number"]
    if value < field.min or value > field.max:
        return [f"{field.label} must be between {format_number(field.min)} and {format_number(field.max)}"]
    allowed = field.option_values()
    if allowed and value not in allowed:
        return [f"{field.label} must be one of {', '.join(format_number(v) for v in allowed)}"]
    return []


def validate_priority_values(framework_id: Optional[str], values: Any) -> List[str]:
    """Human-readable problems with `values` under the framework; empty means valid."""
    framework = get_framework(framework_id)
    errors: List[str] = []

    if isinstance(framework, FIELDED_FRAMEWORKS):
        raw = values if isinstance(values, Mapping) else {}
        for field in framework.fields:
            errors.extend(_field_errors(field, raw.get(field.key)))

    elif isinstance(framework, ScaleFramework):
        if isinstance(values, Mapping):
            selected = values.get("value")
        else:
            selected = values
        if not values or selected is None:
            errors.append("Priority value is required")
        elif framework.option_for(selected) is None:
            allowed = ", ".join(format_number(o.value) for o in framework.values)
            errors.append(f"Priority value must be one of {allowed}")

    return errors


def ensure_valid(framework_id: Optional[str], values: Any) -> ValidPriorityValue:
    """Promote an in-progress value to a ValidPriorityValue or raise PriorityValidationError.

    The returned value carries the resolved framework id so the pair always
    travels together.
    """
    framework = get_framework(framework_id)
    errors = validate_priority_values(framework.id, values)
    if errors:
        raise PriorityValidationError(framework.id, errors)

    if isinstance(values, Mapping):
        payload = dict(values)
    else:
        payload = {"value": values}
    return ValidPriorityValue(framework_id=framework.id, values=payload)


__all__ = [
    "PriorityValidationError",
    "validate_priority_values",
    "ensure_valid",
]
