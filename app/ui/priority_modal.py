# brief_prioritization_project/app/ui/priority_modal.py
"""
Priority modal: framework selector plus the input for one brief.

The modal owns the single in-progress value for the brief being reviewed.
Switching framework discards that value; values are never reinterpreted
under another framework's schema. Saving awaits the caller's handler and
only closes once it succeeds.
"""

from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session

from app.config import settings
from app.services.prioritization import (
    Framework,
    FrameworkKind,
    PriorityValues,
    get_all_frameworks,
    get_framework,
    validate_priority_values,
)
from app.services.brief_review_service import BriefReviewService, make_save_handler
from app.ui.priority_input import InputMode, PriorityInput, PriorityInputView

logger = logging.getLogger("app.ui.priority_modal")

SaveHandler = Callable[[PriorityValues, str], Awaitable[Any]]

FRAMEWORK_TIPS: Dict[str, Dict[str, Any]] = {
    "ice": {
        "intro": "Score each factor from 1-10:",
        "items": [
            ("Impact", "How much will this move the needle?"),
            ("Confidence", "How sure are we this will work?"),
            ("Ease", "How easy is this to implement?"),
        ],
    },
    "rice": {
        "intro": "RICE helps prioritize based on reach and impact vs effort:",
        "items": [
            ("Reach", "How many people/customers affected per time period?"),
            ("Impact", "How much impact per person? (0.25x to 3x)"),
            ("Confidence", "How confident are we? (% from 10-100%)"),
            ("Effort", "How much work? (person-weeks)"),
        ],
    },
    "value_effort": {
        "intro": "Plot this initiative on the Value vs Effort matrix:",
        "items": [
            ("High Value + Low Effort", "Quick wins (do first)"),
            ("High Value + High Effort", "Major projects (plan carefully)"),
            ("Low Value + Low Effort", "Fill-ins (do when time permits)"),
            ("Low Value + High Effort", "Thankless tasks (avoid)"),
        ],
    },
}


class _ViewModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, alias_generator=to_camel)


class FrameworkChoiceView(_ViewModel):
    id: str
    name: str
    description: str
    kind: FrameworkKind
    is_default: bool = False
    selected: bool = False


class TipView(_ViewModel):
    intro: str
    items: List[Dict[str, str]]


class PriorityModalView(_ViewModel):
    title: str
    description: str
    is_open: bool
    frameworks: List[FrameworkChoiceView]
    framework: FrameworkChoiceView
    input: PriorityInputView
    tips: Optional[TipView] = None
    can_save: bool
    saving: bool
    save_label: str
    error: Optional[str] = None


class PriorityModal:
    """Framework selection and priority entry for a single brief."""

    def __init__(
        self,
        on_save: SaveHandler,
        enabled_frameworks: Optional[Sequence[str]] = None,
        default_framework: Optional[str] = None,
        current_value: Optional[PriorityValues] = None,
        current_framework: Optional[str] = None,
        brief_title: str = "Brief",
    ):
        self.on_save = on_save
        self.brief_title = brief_title
        enabled = enabled_frameworks or settings.PRIORITY_ENABLED_FRAMEWORKS
        self.enabled_frameworks = [str(fid).lower() for fid in enabled]
        self.default_framework = get_framework(default_framework or settings.PRIORITY_DEFAULT_FRAMEWORK).id
        self._initial_framework = get_framework(current_framework or self.default_framework).id
        self._initial_value: PriorityValues = dict(current_value or {})

        self.is_open = False
        self.saving = False
        self.last_error: Optional[BaseException] = None
        self._reset_to_initial()

    # ----------------------------
    # Lifecycle
    # ----------------------------

    def open(self) -> None:
        """Show the modal, starting from the brief's stored framework and value."""
        self._reset_to_initial()
        self.is_open = True

    def cancel(self) -> None:
        """Discard the pending edit and close."""
        self._reset_to_initial()
        self.is_open = False

    def _reset_to_initial(self) -> None:
        self.selected_framework = self._initial_framework
        self.last_error = None
        self._bind_input(self._initial_value)

    def _bind_input(self, value: PriorityValues) -> None:
        self.input = PriorityInput(
            framework_id=self.selected_framework,
            value=value,
            on_change=self._handle_change,
            mode=InputMode.FULL,
            show_label=False,
        )
        self.is_valid = not validate_priority_values(self.selected_framework, value)

    def _handle_change(self, new_value: PriorityValues, valid: bool) -> None:
        self.is_valid = valid

    # ----------------------------
    # Framework selection
    # ----------------------------

    @property
    def available_frameworks(self) -> List[Framework]:
        return [fw for fw in get_all_frameworks() if fw.id in self.enabled_frameworks]

    @property
    def shows_selector(self) -> bool:
        return len(self.available_frameworks) > 1

    @property
    def framework(self) -> Framework:
        return get_framework(self.selected_framework)

    @property
    def value(self) -> PriorityValues:
        return self.input.values

    def select_framework(self, framework_id: str) -> None:
        """Switch framework; a different framework starts from an empty value."""
        framework = get_framework(framework_id)
        if framework.id not in self.enabled_frameworks or framework.id != str(framework_id).lower():
            raise ValueError(f"Framework '{framework_id}' is not enabled for this organization")
        if framework.id == self.selected_framework:
            return
        self.selected_framework = framework.id
        self._bind_input({})
        self.is_valid = False

    # ----------------------------
    # Save
    # ----------------------------

    @property
    def can_save(self) -> bool:
        return self.is_valid and not self.saving

    async def save(self) -> bool:
        """Hand (value, framework_id) to the save handler.

        Returns False without calling the handler when the value is invalid or
        a save is already running. A failing handler leaves the modal open with
        `last_error` set and the exception is re-raised to the caller.
        """
        if not self.can_save:
            logger.info(
                "priority_modal.save_rejected",
                extra={
                    "framework": self.selected_framework,
                    "reason": "saving" if self.saving else "invalid",
                    "errors": validate_priority_values(self.selected_framework, self.value) or None,
                },
            )
            return False

        value = self.value
        framework_id = self.selected_framework
        self.saving = True
        self.last_error = None
        try:
            await self.on_save(value, framework_id)
        except Exception as exc:
            self.last_error = exc
            logger.warning(
                "priority_modal.save_failed",
                extra={"framework": framework_id, "error": str(exc)},
            )
            raise
        finally:
            self.saving = False

        # The saved pair becomes the baseline for the next open()
        self._initial_framework = framework_id
        self._initial_value = value
        self.is_open = False
        logger.debug("priority_modal.saved", extra={"framework": framework_id})
        return True

    # ----------------------------
    # Rendering
    # ----------------------------

    def _choice(self, fw: Framework) -> FrameworkChoiceView:
        return FrameworkChoiceView(
            id=fw.id,
            name=fw.name,
            description=fw.description,
            kind=fw.kind,
            is_default=fw.id == self.default_framework,
            selected=fw.id == self.selected_framework,
        )

    def render(self) -> PriorityModalView:
        tips = FRAMEWORK_TIPS.get(self.selected_framework)
        return PriorityModalView(
            title=f"Set Priority: {self.brief_title}",
            description="Choose a prioritization framework and set the priority",
            is_open=self.is_open,
            frameworks=[self._choice(fw) for fw in self.available_frameworks] if self.shows_selector else [],
            framework=self._choice(self.framework),
            input=self.input.render(),
            tips=TipView(
                intro=tips["intro"],
                items=[{"label": label, "text": text} for label, text in tips["items"]],
            ) if tips else None,
            can_save=self.can_save,
            saving=self.saving,
            save_label="Saving..." if self.saving else "Set Priority",
            error=str(self.last_error) if self.last_error else None,
        )


__all__ = [
    "SaveHandler",
    "FRAMEWORK_TIPS",
    "FrameworkChoiceView",
    "TipView",
    "PriorityModalView",
    "PriorityModal",
    "build_brief_priority_modal",
]


def build_brief_priority_modal(
    db: Session,
    session_factory: Callable[[], Session],
    org_id: int,
    brief_id: int,
    reviewed_by: Optional[str] = None,
) -> PriorityModal:
    """Modal for a stored brief: org-enabled frameworks, the stored pair, and a persisting save."""
    svc = BriefReviewService(db)
    org_settings = svc.org_settings(org_id)
    stored = svc.get_brief_priority(org_id, brief_id)
    return PriorityModal(
        on_save=make_save_handler(session_factory, org_id, brief_id, reviewed_by),
        enabled_frameworks=org_settings.enabled_frameworks,
        default_framework=org_settings.default_framework,
        current_value=stored.priority_data,
        current_framework=stored.framework_id if stored.priority_data else None,
        brief_title=stored.title,
    )
