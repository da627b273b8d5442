# Tests for priority labels and display formatting
import math

import pytest

from app.services.prioritization import (
    CompositeFramework,
    ScaleFramework,
    format_priority_display,
    get_all_frameworks,
    get_priority_label,
    validate_priority_values,
)
from app.services.prioritization.utils import format_number


def test_moscow_end_to_end():
    display = format_priority_display("moscow", {"value": "must"})
    assert display.display_text == "Must Have"
    assert display.label == "Must Have"
    assert display.color == "#dc2626"
    assert display.bg_color == "#fef2f2"
    assert display.border_color == "#fca5a5"
    assert display.score == "must"


@pytest.mark.parametrize(
    "values,label",
    [
        ({"impact": 8, "confidence": 10, "ease": 10}, "Critical"),
        ({"impact": 5, "confidence": 10, "ease": 10}, "High"),
        ({"impact": 2, "confidence": 10, "ease": 10}, "Medium"),
        ({"impact": 5, "confidence": 10, "ease": 1}, "Low"),
        ({"impact": 7, "confidence": 7, "ease": 1}, "Backlog"),
    ],
)
def test_ice_buckets(values, label):
    assert get_priority_label("ice", values).label == label


@pytest.mark.parametrize(
    "score,label",
    [(1000, "Critical"), (999.99, "High"), (300, "High"), (100, "Medium"), (30, "Low"), (29.99, "Backlog")],
)
def test_rice_buckets_for_bare_scores(score, label):
    assert get_priority_label("rice", score).label == label


def test_composite_display_includes_score():
    display = format_priority_display("ice", {"impact": 10, "confidence": 10, "ease": 10})
    assert display.display_text == "Critical (1000)"
    assert display.score == 1000

    display = format_priority_display("rice", {"reach": 100, "impact": 2, "confidence": 50, "effort": 10})
    assert display.display_text == "Backlog (10)"

    display = format_priority_display("rice", {"reach": 1, "impact": 1, "confidence": 100, "effort": 3})
    assert display.display_text == "Backlog (0.33)"


def test_non_numeric_input_renders_like_js():
    display = format_priority_display("ice", {"impact": "abc", "confidence": 5, "ease": 5})
    assert display.label == "Backlog"
    assert display.display_text == "Backlog (NaN)"

    assert format_priority_display("ice", math.inf).display_text == "Critical (Infinity)"


@pytest.mark.parametrize(
    "value,text",
    [(1, "1"), (1.0, "1"), (0.25, "0.25"), (math.nan, "NaN"), (math.inf, "Infinity"), (-math.inf, "-Infinity")],
)
def test_format_number(value, text):
    assert format_number(value) == text


def test_matrix_label_is_quadrant():
    label = get_priority_label("value_effort", {"value": 8, "effort": 2})
    assert label.label == "Quick Wins"
    assert label.color == "#059669"
    assert label.rank == 1

    display = format_priority_display("value_effort", {"value": 2, "effort": 8})
    assert display.display_text == "Thankless Tasks"


def test_unmatched_values_render_unknown():
    assert get_priority_label("simple", {"value": 9}).label == "Unknown"
    assert get_priority_label("simple", {"value": 9}).color == "#6b7280"
    assert get_priority_label("tshirt", {"value": "XL"}).label == "Unknown"
    assert get_priority_label("simple", {"value": True}).label == "Unknown"
    assert get_priority_label("ice", "high").label == "Unknown"
    assert get_priority_label("value_effort", 3).label == "Unknown"


def test_unknown_framework_renders_with_simple_scale():
    assert get_priority_label("retired_framework", {"value": 2}).label == "High"


def test_legacy_scalar_for_scale_framework():
    display = format_priority_display("simple", 1)
    assert display.display_text == "Critical"
    assert display.score == 1


def test_format_is_idempotent():
    values = {"reach": 250, "impact": 0.5, "confidence": 80, "effort": 3}
    first = format_priority_display("rice", values)
    second = format_priority_display("rice", values)
    assert first.model_dump_json() == second.model_dump_json()
    assert values == {"reach": 250, "impact": 0.5, "confidence": 80, "effort": 3}


def _valid_samples(fw):
    if isinstance(fw, ScaleFramework):
        return [{"value": option.value} for option in fw.values]
    samples = [
        {f.key: f.options[-1].value if f.options else f.min for f in fw.fields},
        {f.key: f.options[0].value if f.options else f.max for f in fw.fields},
    ]
    for field in fw.fields:
        for option in field.options or ():
            sample = {f.key: f.min for f in fw.fields}
            sample[field.key] = option.value
            samples.append(sample)
    return samples


@pytest.mark.parametrize("fw", get_all_frameworks(), ids=lambda fw: fw.id)
def test_every_valid_value_has_a_known_label(fw):
    for values in _valid_samples(fw):
        assert validate_priority_values(fw.id, values) == []
        assert get_priority_label(fw.id, values).label != "Unknown"
        display = format_priority_display(fw.id, values)
        if isinstance(fw, CompositeFramework):
            assert display.display_text.startswith(display.label + " (")
        else:
            assert display.display_text == display.label
