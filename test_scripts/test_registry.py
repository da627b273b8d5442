# Tests for the framework registry lookups
import pytest

from app.services.prioritization import (
    CompositeFramework,
    FrameworkKind,
    FrameworkRegistry,
    MatrixFramework,
    ScaleFramework,
    get_all_frameworks,
    get_framework,
    has_framework,
)
from app.services.prioritization.registry import BUILTIN_FRAMEWORKS, SIMPLE, TSHIRT


def test_all_frameworks_in_definition_order():
    ids = [fw.id for fw in get_all_frameworks()]
    assert ids == ["simple", "ice", "rice", "moscow", "value_effort", "story_points", "tshirt"]


@pytest.mark.parametrize("fw", BUILTIN_FRAMEWORKS, ids=lambda fw: fw.id)
def test_lookup_is_case_insensitive(fw):
    assert get_framework(fw.id) is fw
    assert get_framework(fw.id.upper()) is fw
    assert get_framework(fw.id.title()) is fw


@pytest.mark.parametrize("requested", ["not-a-real-id", "", None, "wsjf"])
def test_unknown_ids_fall_back_to_simple(requested):
    assert get_framework(requested) is SIMPLE


def test_has_framework_does_not_fall_back():
    assert has_framework("RICE")
    assert not has_framework("not-a-real-id")
    assert not has_framework(None)


def test_framework_variants_carry_their_schema():
    assert isinstance(get_framework("simple"), ScaleFramework)
    assert get_framework("moscow").kind == FrameworkKind.CATEGORICAL
    assert isinstance(get_framework("ice"), CompositeFramework)
    assert get_framework("ice").kind == FrameworkKind.COMPOSITE
    assert isinstance(get_framework("value_effort"), MatrixFramework)
    assert get_framework("value_effort").kind == FrameworkKind.MATRIX

    rice = get_framework("rice")
    assert [f.key for f in rice.fields] == ["reach", "impact", "confidence", "effort"]
    impact = rice.fields[1]
    assert impact.option_values() == (3, 2, 1, 0.5, 0.25)
    assert rice.fields[0].unit == "people/month"


def test_get_all_frameworks_returns_a_copy():
    frameworks = get_all_frameworks()
    frameworks.clear()
    assert len(get_all_frameworks()) == 7


def test_registry_rejects_duplicate_ids():
    with pytest.raises(ValueError):
        FrameworkRegistry([SIMPLE, SIMPLE])


def test_registry_requires_default_framework():
    with pytest.raises(ValueError):
        FrameworkRegistry([TSHIRT])


def test_custom_registry_falls_back_to_its_own_default():
    registry = FrameworkRegistry([SIMPLE, TSHIRT], default_id="tshirt")
    assert registry.get_framework("missing") is TSHIRT
    assert registry.ids() == ["simple", "tshirt"]


def test_unknown_framework_logs_warning_when_configured(caplog):
    registry = FrameworkRegistry([SIMPLE], warn_on_unknown=True)
    with caplog.at_level("WARNING", logger="app.services.prioritization.registry"):
        assert registry.get_framework("legacy_fw") is SIMPLE
    assert any(r.message == "prioritization.unknown_framework" for r in caplog.records)
