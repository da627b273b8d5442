# brief_prioritization_project/app/ui/priority_input.py
"""
Priority input view-model.

Holds the value a reviewer is editing for one framework, runs validation and
scoring on every edit, and renders a serializable control tree that a client
draws either compactly (table cells) or fully labeled (review screens).
Both modes go through the same validation/scoring calls; only the tree differs.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.services.prioritization import (
    FieldSpec,
    FrameworkKind,
    PriorityDisplay,
    PriorityValues,
    ScaleFramework,
    format_priority_display,
    get_framework,
    validate_priority_values,
)
from app.services.prioritization.interfaces import FIELDED_FRAMEWORKS
from app.services.prioritization.utils import format_number

logger = logging.getLogger("app.ui.priority_input")

OnChange = Callable[[PriorityValues, bool], None]


class InputMode(str, Enum):
    COMPACT = "compact"
    FULL = "full"


class PriorityInputDisabledError(RuntimeError):
    """Raised when an edit is attempted on a disabled input."""


class _ViewModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class OptionView(_ViewModel):
    value: Any
    label: str


class ControlView(_ViewModel):
    control: Literal["button", "select", "number", "action", "badge"]
    text: str
    key: Optional[str] = None
    caption: Optional[str] = None
    tooltip: Optional[str] = None
    description: Optional[str] = None
    value: Optional[Any] = None
    selected: bool = False
    disabled: bool = False
    color: Optional[str] = None
    bg_color: Optional[str] = None
    border_color: Optional[str] = None
    min: Optional[float] = None
    max: Optional[float] = None
    step: Optional[float] = None
    placeholder: Optional[str] = None
    options: Optional[List[OptionView]] = None


class PriorityInputView(_ViewModel):
    framework_id: str
    kind: FrameworkKind
    mode: InputMode
    title: Optional[str] = None
    subtitle: Optional[str] = None
    controls: List[ControlView]
    display: Optional[PriorityDisplay] = None
    errors: List[str] = []
    is_valid: bool = False


class BadgeView(_ViewModel):
    text: str
    empty: bool = False
    color: Optional[str] = None
    bg_color: Optional[str] = None
    border_color: Optional[str] = None


def _as_value_map(value: Any) -> PriorityValues:
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return dict(value)
    # legacy storage kept a bare scalar
    return {"value": value}


def _normalize_number(value: float) -> Any:
    return int(value) if float(value).is_integer() else value


def coerce_field_input(raw: Any) -> Any:
    """Turn raw control input into a field value.

    Text is parsed as a number; blank or unparseable text becomes "" so the
    validator reports the field as required.
    """
    if raw is None:
        return ""
    if isinstance(raw, bool):
        return ""
    if isinstance(raw, (int, float)):
        return _normalize_number(raw)
    text = str(raw).strip()
    if not text:
        return ""
    try:
        parsed = float(text)
    except ValueError:
        return ""
    if parsed != parsed:  # NaN
        return ""
    return _normalize_number(parsed)


class PriorityInput:
    """Editable priority value for one framework."""

    def __init__(
        self,
        framework_id: Optional[str] = "simple",
        value: Any = None,
        on_change: Optional[OnChange] = None,
        mode: InputMode = InputMode.FULL,
        disabled: bool = False,
        show_label: bool = True,
    ):
        self.framework = get_framework(framework_id)
        self.on_change = on_change
        self.mode = InputMode(mode)
        self.disabled = disabled
        self.show_label = show_label
        self._values: PriorityValues = _as_value_map(value)
        # Errors are only surfaced after the first edit
        self.errors: List[str] = []

    @property
    def framework_id(self) -> str:
        return self.framework.id

    @property
    def values(self) -> PriorityValues:
        return dict(self._values)

    @property
    def is_valid(self) -> bool:
        return not validate_priority_values(self.framework.id, self._values)

    @property
    def is_complete(self) -> bool:
        """Every field has an entry (composite/matrix) or a value is selected (scale)."""
        if isinstance(self.framework, FIELDED_FRAMEWORKS):
            return all(self._values.get(f.key) not in (None, "") for f in self.framework.fields)
        return self._values.get("value") not in (None, "")

    def set_value(self, value: Any) -> None:
        """Replace the value from outside (e.g. the stored value changed); does not notify."""
        self._values = _as_value_map(value)
        self.errors = []

    # ----------------------------
    # Edits
    # ----------------------------

    def select(self, option_value: Any) -> PriorityValues:
        """Single-select for numeric/categorical frameworks; replaces the whole value."""
        self._ensure_enabled()
        if not isinstance(self.framework, ScaleFramework):
            raise ValueError(f"Framework {self.framework.id} has no selectable values")
        option = self.framework.option_for(option_value)
        if option is None:
            raise ValueError(f"{option_value!r} is not a value of framework {self.framework.id}")
        return self._commit({"value": option.value})

    def set_field(self, key: str, raw: Any) -> PriorityValues:
        """Merge one field edit into the composite/matrix value."""
        self._ensure_enabled()
        field = self._field(key)
        new_values = dict(self._values)
        new_values[field.key] = coerce_field_input(raw)
        return self._commit(new_values)

    def initialize_defaults(self) -> PriorityValues:
        """Compact "Set Priority" action: start every field at its minimum."""
        self._ensure_enabled()
        if not isinstance(self.framework, FIELDED_FRAMEWORKS):
            raise ValueError(f"Framework {self.framework.id} has no fields")
        return self._commit({f.key: _normalize_number(f.min) for f in self.framework.fields})

    def _field(self, key: str) -> FieldSpec:
        if not isinstance(self.framework, FIELDED_FRAMEWORKS):
            raise ValueError(f"Framework {self.framework.id} has no fields")
        for field in self.framework.fields:
            if field.key == key:
                return field
        raise KeyError(f"Unknown field '{key}' for framework {self.framework.id}")

    def _ensure_enabled(self) -> None:
        if self.disabled:
            raise PriorityInputDisabledError(f"Priority input for {self.framework.id} is disabled")

    def _commit(self, new_values: PriorityValues) -> PriorityValues:
        self._values = new_values
        self.errors = validate_priority_values(self.framework.id, new_values)
        is_valid = not self.errors
        logger.debug(
            "priority_input.changed",
            extra={"framework": self.framework.id, "errors": self.errors or None},
        )
        if self.on_change is not None:
            self.on_change(dict(new_values), is_valid)
        return dict(new_values)

    # ----------------------------
    # Rendering
    # ----------------------------

    def render(self) -> PriorityInputView:
        if isinstance(self.framework, ScaleFramework):
            controls = self._scale_controls()
            display = None
            if self.mode == InputMode.FULL and self._values.get("value"):
                display = format_priority_display(self.framework.id, self._values)
            title = self.framework.name if self.mode == InputMode.FULL and self.show_label else None
            return self._view(controls, display, title=title)

        if self.mode == InputMode.COMPACT:
            return self._compact_fielded_view()
        return self._full_fielded_view()

    def _view(self, controls, display, title=None, subtitle=None, errors=None) -> PriorityInputView:
        return PriorityInputView(
            framework_id=self.framework.id,
            kind=self.framework.kind,
            mode=self.mode,
            title=title,
            subtitle=subtitle,
            controls=controls,
            display=display,
            errors=errors or [],
            is_valid=self.is_valid,
        )

    def _scale_controls(self) -> List[ControlView]:
        fw = self.framework
        categorical = fw.kind == FrameworkKind.CATEGORICAL
        selected_value = self._values.get("value")
        controls = []
        for option in fw.values:
            words = option.label.split(" ")
            text = words[0] if categorical else format_number(option.value)
            if self.mode == InputMode.COMPACT:
                caption = None
                tooltip = f"{option.label}: {option.description}" if option.description else option.label
            else:
                caption = " ".join(words[1:]) or None
                tooltip = option.description
            controls.append(
                ControlView(
                    control="button",
                    text=text,
                    caption=caption,
                    tooltip=tooltip,
                    value=option.value,
                    selected=selected_value is not None and fw.option_for(selected_value) is option,
                    disabled=self.disabled,
                    color=option.color,
                    bg_color=option.bg_color,
                    border_color=option.border_color,
                )
            )
        return controls

    def _compact_fielded_view(self) -> PriorityInputView:
        if self.is_complete:
            display = format_priority_display(self.framework.id, self._values)
            badge = ControlView(control="badge", text=display.display_text, color=display.color)
            return self._view([badge], display)

        action = ControlView(control="action", text="Set Priority", disabled=self.disabled)
        return self._view([action], None)

    def _full_fielded_view(self) -> PriorityInputView:
        controls = []
        for field in self.framework.fields:
            text = f"{field.label} ({field.unit})" if field.unit else field.label
            current = self._values.get(field.key)
            current = "" if current is None else current
            if field.options:
                controls.append(
                    ControlView(
                        control="select",
                        key=field.key,
                        text=text,
                        description=field.description,
                        value=current,
                        disabled=self.disabled,
                        placeholder="Select...",
                        options=[OptionView(value=_normalize_number(o.value), label=o.label) for o in field.options],
                    )
                )
            else:
                controls.append(
                    ControlView(
                        control="number",
                        key=field.key,
                        text=text,
                        description=field.description,
                        value=current,
                        disabled=self.disabled,
                        min=field.min,
                        max=field.max,
                        step=field.step or 1,
                        placeholder=f"{format_number(field.min)}-{format_number(field.max)}",
                    )
                )

        display = format_priority_display(self.framework.id, self._values) if self.is_complete else None
        return self._view(
            controls,
            display,
            title=self.framework.name,
            subtitle=self.framework.description,
            errors=self.errors,
        )


def render_priority_badge(framework_id: Optional[str], value: Any, show_score: bool = True) -> BadgeView:
    """Read-only badge for a stored priority; empty values render "Not set"."""
    if not value or (isinstance(value, Mapping) and len(value) == 0):
        return BadgeView(text="Not set", empty=True)

    display = format_priority_display(framework_id, value)
    return BadgeView(
        text=display.display_text if show_score else display.label,
        color=display.color,
        bg_color=display.bg_color or f"{display.color}10",
        border_color=display.border_color or f"{display.color}40",
    )


__all__ = [
    "InputMode",
    "PriorityInputDisabledError",
    "ControlView",
    "OptionView",
    "PriorityInputView",
    "BadgeView",
    "PriorityInput",
    "coerce_field_input",
    "render_priority_badge",
]
