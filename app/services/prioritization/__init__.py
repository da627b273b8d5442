from .interfaces import (
    FrameworkKind,
    Framework,
    ScaleFramework,
    CompositeFramework,
    MatrixFramework,
    FieldSpec,
    ScaleOption,
    PriorityLabel,
    PriorityDisplay,
    PriorityValues,
    Quadrant,
    ValidPriorityValue,
)
from .registry import (
    FrameworkRegistry,
    DEFAULT_REGISTRY,
    get_framework,
    get_all_frameworks,
    has_framework,
)
from .calculator import calculate_priority_score, get_quadrant
from .validator import PriorityValidationError, validate_priority_values, ensure_valid
from .formatter import get_priority_label, format_priority_display

__all__ = [
    "FrameworkKind",
    "Framework",
    "ScaleFramework",
    "CompositeFramework",
    "MatrixFramework",
    "FieldSpec",
    "ScaleOption",
    "PriorityLabel",
    "PriorityDisplay",
    "PriorityValues",
    "Quadrant",
    "ValidPriorityValue",
    "FrameworkRegistry",
    "DEFAULT_REGISTRY",
    "get_framework",
    "get_all_frameworks",
    "has_framework",
    "calculate_priority_score",
    "get_quadrant",
    "PriorityValidationError",
    "validate_priority_values",
    "ensure_valid",
    "get_priority_label",
    "format_priority_display",
]
