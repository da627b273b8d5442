# brief_prioritization_project/app/services/prioritization/registry.py
"""
Registry for prioritization frameworks. This module defines the catalog of
available frameworks, their input schemas, and provides read-only lookup.

Framework ids and field keys are referenced by stored priority values
indefinitely, so they must never be renamed.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional

from app.config import settings
from app.services.prioritization.engines import (
    IceScoringEngine,
    RiceScoringEngine,
    ValueEffortMatrixEngine,
)
from app.services.prioritization.interfaces import (
    FIELDED_FRAMEWORKS,
    CompositeFramework,
    FieldOption,
    FieldSpec,
    Framework,
    FrameworkKind,
    MatrixFramework,
    ScaleFramework,
    ScaleOption,
)

logger = logging.getLogger("app.services.prioritization.registry")

DEFAULT_FRAMEWORK_ID = "simple"


def _option(value, label, color, bg_color, border_color, description=None) -> ScaleOption:
    return ScaleOption(
        value=value,
        label=label,
        color=color,
        bg_color=bg_color,
        border_color=border_color,
        description=description,
    )


SIMPLE = ScaleFramework(
    id="simple",
    name="1-5 Priority Scale",
    description="Simple numeric scale from 1 (highest) to 5 (lowest)",
    kind=FrameworkKind.NUMERIC,
    values=(
        _option(1, "Critical", "#dc2626", "#fef2f2", "#fca5a5"),
        _option(2, "High", "#d97706", "#fffbeb", "#fbbf24"),
        _option(3, "Medium", "#059669", "#ecfdf5", "#6ee7b7"),
        _option(4, "Low", "#2563eb", "#eff6ff", "#93c5fd"),
        _option(5, "Backlog", "#6b7280", "#f9fafb", "#d1d5db"),
    ),
)

ICE = CompositeFramework(
    id="ice",
    name="ICE Framework",
    description="Impact × Confidence × Ease scoring (1-10 each, total 1-1000)",
    fields=(
        FieldSpec(key="impact", label="Impact", description="How much will this move the needle?", min=1, max=10),
        FieldSpec(key="confidence", label="Confidence", description="How confident are we this will work?", min=1, max=10),
        FieldSpec(key="ease", label="Ease", description="How easy is this to implement?", min=1, max=10),
    ),
    engine=IceScoringEngine(),
)

RICE = CompositeFramework(
    id="rice",
    name="RICE Framework",
    description="Reach × Impact × Confidence ÷ Effort scoring",
    fields=(
        FieldSpec(
            key="reach",
            label="Reach",
            description="How many people will this affect?",
            min=1,
            max=1000,
            unit="people/month",
        ),
        FieldSpec(
            key="impact",
            label="Impact",
            description="How much impact per person?",
            min=0.25,
            max=3,
            step=0.25,
            options=(
                FieldOption(value=3, label="Massive (3x)"),
                FieldOption(value=2, label="High (2x)"),
                FieldOption(value=1, label="Medium (1x)"),
                FieldOption(value=0.5, label="Low (0.5x)"),
                FieldOption(value=0.25, label="Minimal (0.25x)"),
            ),
        ),
        FieldSpec(
            key="confidence",
            label="Confidence",
            description="How confident are we in our estimates?",
            min=10,
            max=100,
            unit="%",
        ),
        FieldSpec(
            key="effort",
            label="Effort",
            description="How much work will this take?",
            min=1,
            max=52,
            unit="person-weeks",
        ),
    ),
    engine=RiceScoringEngine(),
)

MOSCOW = ScaleFramework(
    id="moscow",
    name="MoSCoW Framework",
    description="Must have, Should have, Could have, Won't have",
    kind=FrameworkKind.CATEGORICAL,
    values=(
        _option("must", "Must Have", "#dc2626", "#fef2f2", "#fca5a5", "Critical, non-negotiable requirements"),
        _option("should", "Should Have", "#d97706", "#fffbeb", "#fbbf24", "Important but not critical"),
        _option("could", "Could Have", "#059669", "#ecfdf5", "#6ee7b7", "Nice to have if time permits"),
        _option("wont", "Won't Have", "#6b7280", "#f9fafb", "#d1d5db", "Not planned for this iteration"),
    ),
)

VALUE_EFFORT = MatrixFramework(
    id="value_effort",
    name="Value vs Effort Matrix",
    description="Plot initiatives on Value (1-10) vs Effort (1-10) matrix",
    fields=(
        FieldSpec(
            key="value",
            label="Business Value",
            description="How much business value will this deliver?",
            min=1,
            max=10,
        ),
        FieldSpec(
            key="effort",
            label="Implementation Effort",
            description="How much effort will this require?",
            min=1,
            max=10,
        ),
    ),
    engine=ValueEffortMatrixEngine(),
)

STORY_POINTS = ScaleFramework(
    id="story_points",
    name="Story Points (Fibonacci)",
    description="Fibonacci sequence for relative sizing (1, 2, 3, 5, 8, 13, 21)",
    kind=FrameworkKind.NUMERIC,
    values=(
        _option(1, "1 - Trivial", "#059669", "#ecfdf5", "#6ee7b7"),
        _option(2, "2 - Minor", "#059669", "#ecfdf5", "#6ee7b7"),
        _option(3, "3 - Small", "#2563eb", "#eff6ff", "#93c5fd"),
        _option(5, "5 - Medium", "#d97706", "#fffbeb", "#fbbf24"),
        _option(8, "8 - Large", "#dc2626", "#fef2f2", "#fca5a5"),
        _option(13, "13 - X-Large", "#7c2d12", "#fef2f2", "#f87171"),
        _option(21, "21 - Epic", "#6b7280", "#f9fafb", "#d1d5db"),
    ),
)

TSHIRT = ScaleFramework(
    id="tshirt",
    name="T-Shirt Sizes",
    description="XS, S, M, L, XL, XXL sizing for relative estimation",
    kind=FrameworkKind.CATEGORICAL,
    values=(
        _option("xs", "XS - Extra Small", "#059669", "#ecfdf5", "#6ee7b7"),
        _option("s", "S - Small", "#2563eb", "#eff6ff", "#93c5fd"),
        _option("m", "M - Medium", "#d97706", "#fffbeb", "#fbbf24"),
        _option("l", "L - Large", "#dc2626", "#fef2f2", "#fca5a5"),
        _option("xl", "XL - Extra Large", "#7c2d12", "#fef2f2", "#f87171"),
        _option("xxl", "XXL - Extra Extra Large", "#6b7280", "#f9fafb", "#d1d5db"),
    ),
)

BUILTIN_FRAMEWORKS = (SIMPLE, ICE, RICE, MOSCOW, VALUE_EFFORT, STORY_POINTS, TSHIRT)


class FrameworkRegistry:
    """Immutable catalog of prioritization frameworks, keyed by lower-cased id."""

    def __init__(
        self,
        frameworks: Iterable[Framework],
        default_id: str = DEFAULT_FRAMEWORK_ID,
        warn_on_unknown: bool = False,
    ):
        by_id: Dict[str, Framework] = {}
        for fw in frameworks:
            key = fw.id.lower()
            if key in by_id:
                raise ValueError(f"Duplicate framework id: {fw.id}")
            _check_schema(fw)
            by_id[key] = fw

        if default_id.lower() not in by_id:
            raise ValueError(f"Default framework '{default_id}' is not in the registry")

        self._by_id = by_id
        self._ordered = tuple(by_id.values())
        self._default = by_id[default_id.lower()]
        self._warn_on_unknown = warn_on_unknown

    @property
    def default(self) -> Framework:
        return self._default

    def has_framework(self, framework_id: Optional[str]) -> bool:
        return bool(framework_id) and str(framework_id).lower() in self._by_id

    def get_framework(self, framework_id: Optional[str]) -> Framework:
        """Case-insensitive lookup; unknown or empty ids resolve to the default framework."""
        if framework_id:
            fw = self._by_id.get(str(framework_id).lower())
            if fw is not None:
                return fw

        log = logger.warning if self._warn_on_unknown else logger.debug
        log(
            "prioritization.unknown_framework",
            extra={
                "requested_framework": framework_id,
                "framework": self._default.id,
                "reason": "missing" if not framework_id else "unknown",
            },
        )
        return self._default

    def get_all_frameworks(self) -> List[Framework]:
        return list(self._ordered)

    def ids(self) -> List[str]:
        return [fw.id for fw in self._ordered]


def _check_schema(fw: Framework) -> None:
    if isinstance(fw, FIELDED_FRAMEWORKS):
        keys = [f.key for f in fw.fields]
        if len(set(keys)) != len(keys):
            raise ValueError(f"Duplicate field key in framework {fw.id}")
    else:
        values = [o.value for o in fw.values]
        if len(set(values)) != len(values):
            raise ValueError(f"Duplicate scale value in framework {fw.id}")


def build_default_registry() -> FrameworkRegistry:
    return FrameworkRegistry(
        BUILTIN_FRAMEWORKS,
        warn_on_unknown=settings.PRIORITY_WARN_UNKNOWN_FRAMEWORK,
    )


DEFAULT_REGISTRY = build_default_registry()


def get_framework(framework_id: Optional[str]) -> Framework:
    return DEFAULT_REGISTRY.get_framework(framework_id)


def get_all_frameworks() -> List[Framework]:
    return DEFAULT_REGISTRY.get_all_frameworks()


def has_framework(framework_id: Optional[str]) -> bool:
    return DEFAULT_REGISTRY.has_framework(framework_id)


__all__ = [
    "DEFAULT_FRAMEWORK_ID",
    "BUILTIN_FRAMEWORKS",
    "FrameworkRegistry",
    "DEFAULT_REGISTRY",
    "build_default_registry",
    "get_framework",
    "get_all_frameworks",
    "has_framework",
]
