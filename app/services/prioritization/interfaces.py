# brief_prioritization_project/app/services/prioritization/interfaces.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional, Protocol, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FrameworkKind(str, Enum):
    """Input/scoring shape of a prioritization framework."""
    NUMERIC = "numeric"
    CATEGORICAL = "categorical"
    COMPOSITE = "composite"
    MATRIX = "matrix"


# In-progress value entered by a reviewer; may be partial.
PriorityValues = Dict[str, Any]

ScaleValue = Union[int, float, str]


class _CatalogModel(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)


class ScaleOption(_CatalogModel):
    """One selectable entry of a numeric/categorical framework."""
    value: ScaleValue
    label: str
    color: str
    bg_color: str
    border_color: str
    description: Optional[str] = None


class FieldOption(_CatalogModel):
    value: float
    label: str


class FieldSpec(_CatalogModel):
    """One independently entered dimension of a composite/matrix framework.

    When `options` is set, input is constrained to the enumerated values
    instead of the free [min, max] range.
    """
    key: str
    label: str
    description: str
    min: float
    max: float
    step: Optional[float] = None
    unit: Optional[str] = None
    options: Optional[Tuple[FieldOption, ...]] = None

    def option_values(self) -> Tuple[float, ...]:
        return tuple(o.value for o in self.options or ())


class PriorityLabel(_CatalogModel):
    label: str
    color: str
    bg_color: Optional[str] = None
    border_color: Optional[str] = None
    # Quadrant rank for matrix frameworks (1 = do first)
    rank: Optional[int] = None


class PriorityDisplay(PriorityLabel):
    display_text: str
    score: Optional[Any] = None


class ValidPriorityValue(_CatalogModel):
    """A complete, validated value bound to the framework it was entered under.

    Build it with `validator.ensure_valid`; persistence only accepts this type.
    """
    framework_id: str
    values: Dict[str, Any] = Field(default_factory=dict)


@dataclass(frozen=True)
class ScoreBucket:
    """Inclusive lower bound for a score label; buckets are evaluated high-to-low."""
    threshold: float
    label: str
    color: str


@dataclass(frozen=True)
class Quadrant:
    label: str
    color: str
    rank: int


class CompositeScoringEngine(Protocol):
    """Protocol that composite (scalar score) engines must satisfy."""

    buckets: Tuple[ScoreBucket, ...]

    def compute(self, values: Mapping[str, Any]) -> float:  # pragma: no cover - interface only
        ...

    def label_for(self, score: float) -> PriorityLabel:  # pragma: no cover - interface only
        ...


class MatrixEngine(Protocol):
    """Protocol that matrix (quadrant) engines must satisfy."""

    def classify(self, values: Mapping[str, Any]) -> Quadrant:  # pragma: no cover - interface only
        ...


@dataclass(frozen=True)
class ScaleFramework:
    id: str
    name: str
    description: str
    kind: FrameworkKind
    values: Tuple[ScaleOption, ...]

    def option_for(self, value: Any) -> Optional[ScaleOption]:
        # bool is an int subclass; True must not match the option 1
        if isinstance(value, bool):
            return None
        for option in self.values:
            if option.value == value:
                return option
        return None


@dataclass(frozen=True)
class CompositeFramework:
    id: str
    name: str
    description: str
    fields: Tuple[FieldSpec, ...]
    engine: CompositeScoringEngine
    kind: FrameworkKind = field(default=FrameworkKind.COMPOSITE, init=False)


@dataclass(frozen=True)
class MatrixFramework:
    id: str
    name: str
    description: str
    fields: Tuple[FieldSpec, ...]
    engine: MatrixEngine
    kind: FrameworkKind = field(default=FrameworkKind.MATRIX, init=False)


Framework = Union[ScaleFramework, CompositeFramework, MatrixFramework]

# Frameworks whose value is a map of independently entered fields
FIELDED_FRAMEWORKS = (CompositeFramework, MatrixFramework)


__all__ = [
    "FrameworkKind",
    "PriorityValues",
    "ScaleValue",
    "ScaleOption",
    "FieldOption",
    "FieldSpec",
    "PriorityLabel",
    "PriorityDisplay",
    "ValidPriorityValue",
    "ScoreBucket",
    "Quadrant",
    "CompositeScoringEngine",
    "MatrixEngine",
    "ScaleFramework",
    "CompositeFramework",
    "MatrixFramework",
    "Framework",
    "FIELDED_FRAMEWORKS",
]
