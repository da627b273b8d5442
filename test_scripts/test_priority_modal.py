# Tests for the framework selector / priority modal
import asyncio

import pytest

from app.ui.priority_modal import PriorityModal, build_brief_priority_modal
from app.db.models import ProjectBrief


class SaveSpy:
    def __init__(self, fail_times=0):
        self.calls = []
        self.fail_times = fail_times

    async def __call__(self, value, framework_id):
        self.calls.append((value, framework_id))
        if self.fail_times:
            self.fail_times -= 1
            raise RuntimeError("network down")


ENABLED = ["simple", "ice", "moscow"]


def make_modal(**kwargs):
    kwargs.setdefault("enabled_frameworks", ENABLED)
    kwargs.setdefault("default_framework", "simple")
    spy = kwargs.pop("spy", SaveSpy())
    modal = PriorityModal(on_save=spy, **kwargs)
    modal.open()
    return modal, spy


def test_initializes_from_current_value():
    modal, _ = make_modal(
        current_value={"impact": 5, "confidence": 5, "ease": 5},
        current_framework="ice",
    )
    assert modal.selected_framework == "ice"
    assert modal.value == {"impact": 5, "confidence": 5, "ease": 5}
    assert modal.can_save is True


def test_defaults_to_org_default_framework():
    modal, _ = make_modal(default_framework="moscow")
    assert modal.selected_framework == "moscow"
    assert modal.value == {}
    assert modal.can_save is False


def test_switching_framework_resets_value():
    modal, _ = make_modal()
    modal.select_framework("ice")
    modal.input.set_field("impact", 5)
    modal.input.set_field("confidence", 5)
    modal.input.set_field("ease", 5)
    assert modal.can_save is True

    modal.select_framework("moscow")
    assert modal.value == {}
    assert modal.can_save is False
    assert modal.input.framework_id == "moscow"


def test_reselecting_same_framework_keeps_value():
    modal, _ = make_modal()
    modal.input.select(2)
    modal.select_framework("SIMPLE")
    assert modal.value == {"value": 2}


@pytest.mark.parametrize("framework_id", ["rice", "not-a-framework"])
def test_cannot_select_disabled_or_unknown_framework(framework_id):
    modal, _ = make_modal()
    with pytest.raises(ValueError):
        modal.select_framework(framework_id)
    assert modal.selected_framework == "simple"


def test_available_frameworks_follow_registry_order():
    modal, _ = make_modal(enabled_frameworks=["moscow", "simple", "ice"])
    assert [fw.id for fw in modal.available_frameworks] == ["simple", "ice", "moscow"]
    assert modal.shows_selector is True

    single, _ = make_modal(enabled_frameworks=["ice"], default_framework="ice")
    assert single.shows_selector is False
    assert single.render().frameworks == []


def test_save_rejected_while_invalid():
    modal, spy = make_modal()
    assert asyncio.run(modal.save()) is False
    assert spy.calls == []
    assert modal.is_open is True


def test_save_hands_value_and_framework_then_closes():
    modal, spy = make_modal()
    modal.select_framework("moscow")
    modal.input.select("should")

    assert asyncio.run(modal.save()) is True
    assert spy.calls == [({"value": "should"}, "moscow")]
    assert modal.is_open is False

    # reopening starts from the saved pair
    modal.open()
    assert modal.selected_framework == "moscow"
    assert modal.value == {"value": "should"}


def test_failed_save_keeps_modal_open_for_retry():
    modal, spy = make_modal(spy=SaveSpy(fail_times=1))
    modal.input.select(1)

    with pytest.raises(RuntimeError):
        asyncio.run(modal.save())
    assert modal.is_open is True
    assert modal.saving is False
    assert str(modal.last_error) == "network down"
    assert modal.render().error == "network down"
    assert modal.value == {"value": 1}

    assert asyncio.run(modal.save()) is True
    assert len(spy.calls) == 2
    assert modal.is_open is False
    assert modal.last_error is None


def test_cancel_restores_initial_state():
    modal, spy = make_modal(current_value={"value": 4}, current_framework="simple")
    modal.select_framework("moscow")
    modal.input.select("must")

    modal.cancel()
    assert modal.is_open is False
    assert modal.selected_framework == "simple"
    assert modal.value == {"value": 4}
    assert spy.calls == []


def test_render_includes_tips_and_selector():
    modal, _ = make_modal(brief_title="Onboarding revamp")
    modal.select_framework("ice")
    view = modal.render()

    assert view.title == "Set Priority: Onboarding revamp"
    assert [f.id for f in view.frameworks] == ["simple", "ice", "moscow"]
    assert [f.is_default for f in view.frameworks] == [True, False, False]
    assert view.framework.id == "ice"
    assert view.tips.intro == "Score each factor from 1-10:"
    assert view.save_label == "Set Priority"
    assert view.can_save is False
    assert view.input.framework_id == "ice"

    modal.select_framework("moscow")
    assert modal.render().tips is None


def test_brief_modal_persists_through_review_service(db, session_factory, seeded):
    modal = build_brief_priority_modal(
        db, session_factory, seeded["org_id"], seeded["brief_id"], reviewed_by="pm@example.com"
    )
    modal.open()
    assert modal.selected_framework == "ice"
    assert [fw.id for fw in modal.available_frameworks] == ["simple", "ice", "rice", "moscow", "value_effort"]

    modal.select_framework("value_effort")
    modal.input.set_field("value", 9)
    modal.input.set_field("effort", 2)
    assert asyncio.run(modal.save()) is True

    check = session_factory()
    try:
        brief = check.get(ProjectBrief, seeded["brief_id"])
        assert brief.framework_id == "value_effort"
        assert brief.priority_data == {"value": 9, "effort": 2}
        assert brief.reviewed_by == "pm@example.com"
    finally:
        check.close()
