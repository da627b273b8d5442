# Tests for score calculation and value/effort quadrants
import pytest

from app.services.prioritization import calculate_priority_score, get_quadrant


def test_ice_multiplies_factors():
    assert calculate_priority_score("ice", {"impact": 10, "confidence": 10, "ease": 10}) == 1000
    assert calculate_priority_score("ice", {"impact": 5, "confidence": 4, "ease": 2}) == 40


def test_ice_missing_factors_default_to_one():
    assert calculate_priority_score("ice", {}) == 1
    assert calculate_priority_score("ice", {"impact": 7, "ease": None}) == 7


def test_rice_formula():
    score = calculate_priority_score("rice", {"reach": 100, "impact": 2, "confidence": 50, "effort": 10})
    assert score == 10


def test_rice_defaults():
    # reach=1, impact=1, confidence=100%, effort=1
    assert calculate_priority_score("rice", {}) == 1


def test_rice_rounds_half_up_to_two_decimals():
    assert calculate_priority_score("rice", {"reach": 1, "impact": 1, "confidence": 100, "effort": 3}) == 0.33
    assert calculate_priority_score("rice", {"reach": 1, "impact": 0.5, "confidence": 100, "effort": 4}) == 0.13


def test_scale_frameworks_return_raw_value():
    assert calculate_priority_score("simple", {"value": 2}) == 2
    assert calculate_priority_score("moscow", {"value": "must"}) == "must"
    assert calculate_priority_score("story_points", {"value": 13}) == 13


def test_legacy_scalar_is_returned_unchanged():
    assert calculate_priority_score("simple", 4) == 4


def test_unknown_framework_uses_simple_rules():
    assert calculate_priority_score("nope", {"value": 3}) == 3


@pytest.mark.parametrize(
    "values,label,rank",
    [
        ({"value": 8, "effort": 2}, "Quick Wins", 1),
        ({"value": 8, "effort": 8}, "Major Projects", 2),
        ({"value": 2, "effort": 2}, "Fill-ins", 3),
        ({"value": 2, "effort": 8}, "Thankless Tasks", 4),
        ({"value": 5, "effort": 5}, "Evaluate", 2),
        ({"value": 8, "effort": 5}, "Evaluate", 2),
        ({"value": 6, "effort": 1}, "Evaluate", 2),
        ({}, "Evaluate", 2),
    ],
)
def test_value_effort_quadrants(values, label, rank):
    quadrant = get_quadrant(values)
    assert quadrant.label == label
    assert quadrant.rank == rank


def test_quadrant_boundaries_are_inclusive():
    assert get_quadrant({"value": 7, "effort": 4}).label == "Quick Wins"
    assert get_quadrant({"value": 4, "effort": 7}).label == "Thankless Tasks"
