# brief_prioritization_project/app/services/brief_review_service.py
"""
Brief review service: persists a reviewer's priority for a brief and reads it back.

The stored pair is (priority_data, framework_id); priority_data is never
interpreted without its framework. A derived 1-5 `priority` column is kept
for sorting briefs that were ranked under different frameworks.
"""

from __future__ import annotations

import asyncio
import logging
import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional

from sqlalchemy.orm import Session

from app.config import settings
from app.db.models.brief import ProjectBrief
from app.db.models.organization import Organization
from app.schemas.brief import BriefPriorityRead
from app.services.prioritization import (
    CompositeFramework,
    MatrixFramework,
    PriorityValues,
    ValidPriorityValue,
    calculate_priority_score,
    ensure_valid,
    format_priority_display,
    get_framework,
    has_framework,
)
from app.services.prioritization.utils import clamp, is_number

logger = logging.getLogger("app.services.brief_review")

REVIEW_STATUS_REVIEWED = "reviewed"

# Sort rank per scale value, keyed by framework id
_SCALE_RANKS: Dict[str, Dict[Any, int]] = {
    "simple": {1: 1, 2: 2, 3: 3, 4: 4, 5: 5},
    "moscow": {"must": 1, "should": 2, "could": 3, "wont": 4},
    "story_points": {1: 1, 2: 1, 3: 2, 5: 3, 8: 4, 13: 5, 21: 5},
    "tshirt": {"xs": 1, "s": 2, "m": 3, "l": 4, "xl": 5, "xxl": 5},
}
_FALLBACK_RANK = 3


class BriefNotFoundError(LookupError):
    pass


class OrganizationNotFoundError(LookupError):
    pass


class UnknownFrameworkError(ValueError):
    """A write named a framework id the registry does not know."""


class FrameworkNotEnabledError(ValueError):
    """The framework exists but the organization has not enabled it."""


@dataclass(frozen=True)
class OrgPrioritySettings:
    default_framework: str
    enabled_frameworks: List[str] = field(default_factory=list)


def resolve_org_settings(org: Optional[Organization]) -> OrgPrioritySettings:
    """Organization prioritization settings with application defaults filled in.

    Unknown ids in the stored settings are dropped; at least one framework is
    always enabled, and the default is always one of the enabled ones.
    """
    doc = (org.document_settings or {}) if org is not None else {}

    enabled_raw = doc.get("enabled_prioritization_frameworks") or settings.PRIORITY_ENABLED_FRAMEWORKS
    enabled: List[str] = []
    for fid in enabled_raw:
        if not has_framework(fid):
            logger.warning(
                "brief_review.unknown_enabled_framework",
                extra={"org_id": getattr(org, "id", None), "requested_framework": fid},
            )
            continue
        canonical = get_framework(fid).id
        if canonical not in enabled:
            enabled.append(canonical)
    if not enabled:
        enabled = [get_framework(None).id]

    default_raw = doc.get("prioritization_framework") or settings.PRIORITY_DEFAULT_FRAMEWORK
    default = get_framework(default_raw).id
    if default not in enabled:
        default = enabled[0]

    return OrgPrioritySettings(default_framework=default, enabled_frameworks=enabled)


def legacy_sort_priority(framework_id: Optional[str], values: Any) -> int:
    """Map a priority under any framework onto the 1 (highest) - 5 (lowest) sort scale."""
    fw = get_framework(framework_id)
    data: Mapping[str, Any] = values if isinstance(values, Mapping) else {"value": values}

    if isinstance(fw, CompositeFramework):
        # Rank follows the label buckets: Critical -> 1 ... Backlog -> 5
        score = calculate_priority_score(fw.id, data)
        for rank, bucket in enumerate(fw.engine.buckets, start=1):
            if score >= bucket.threshold:
                return rank
        return len(fw.engine.buckets) + 1

    if isinstance(fw, MatrixFramework):
        value, effort = data.get("value"), data.get("effort")
        if is_number(value) and is_number(effort):
            return int(clamp(math.floor((11 - value + effort) / 2), 1, 5))
        return _FALLBACK_RANK

    raw = data.get("value")
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        return _FALLBACK_RANK
    return _SCALE_RANKS.get(fw.id, {}).get(raw, _FALLBACK_RANK)


class BriefReviewService:
    """Service layer for reading and writing brief priorities.

    Responsibilities:
    - Resolve the organization's enabled/default frameworks
    - Validate the submitted value against its framework before persisting
    - Store (priority_data, framework_id) verbatim plus the derived sort priority
    - Render stored priorities for display
    """

    def __init__(self, db: Session):
        self.db = db

    def get_organization(self, org_id: int) -> Organization:
        org = self.db.get(Organization, org_id)
        if org is None:
            raise OrganizationNotFoundError(f"Organization {org_id} not found")
        return org

    def get_brief(self, org_id: int, brief_id: int) -> ProjectBrief:
        brief = (
            self.db.query(ProjectBrief)
            .filter(ProjectBrief.id == brief_id, ProjectBrief.org_id == org_id)
            .one_or_none()
        )
        if brief is None:
            raise BriefNotFoundError(f"Brief {brief_id} not found")
        return brief

    def org_settings(self, org_id: int) -> OrgPrioritySettings:
        return resolve_org_settings(self.get_organization(org_id))

    def submit_review(
        self,
        org_id: int,
        brief_id: int,
        priority_data: Optional[PriorityValues],
        framework_id: Optional[str] = None,
        reviewed_by: Optional[str] = None,
        legacy_priority: Optional[int] = None,
    ) -> ProjectBrief:
        """Validate and persist a review. Flushes but does not commit.

        Raises:
            OrganizationNotFoundError / BriefNotFoundError: unknown org or brief
            UnknownFrameworkError: framework id not in the registry
            FrameworkNotEnabledError: framework not enabled for the org (re-saving
                under the brief's already-stored framework is allowed)
            PriorityValidationError: incomplete or out-of-range value
        """
        org_settings = self.org_settings(org_id)
        brief = self.get_brief(org_id, brief_id)

        requested = framework_id or org_settings.default_framework
        if not has_framework(requested):
            raise UnknownFrameworkError(f"Unknown prioritization framework: {requested}")
        fw_id = get_framework(requested).id

        already_stored = bool(brief.priority_data) and fw_id == brief.framework_id
        if fw_id not in org_settings.enabled_frameworks and not already_stored:
            raise FrameworkNotEnabledError(
                f"Framework '{fw_id}' is not enabled for organization {org_id}"
            )

        # Legacy clients send a bare 1-5 `priority` for the simple scale
        if not priority_data and legacy_priority is not None and fw_id == "simple":
            priority_data = {"value": legacy_priority}

        valid = ensure_valid(fw_id, priority_data if priority_data is not None else {})
        self.apply_review(brief, valid, reviewed_by)

        logger.info(
            "brief_review.submitted",
            extra={
                "org_id": org_id,
                "brief_id": brief_id,
                "framework": fw_id,
                "priority": brief.priority,
                "reviewed_by": reviewed_by,
            },
        )
        return brief

    def apply_review(self, brief: ProjectBrief, valid: ValidPriorityValue, reviewed_by: Optional[str]) -> None:
        brief.priority_data = dict(valid.values)  # type: ignore[assignment]
        brief.framework_id = valid.framework_id  # type: ignore[assignment]
        brief.priority = legacy_sort_priority(valid.framework_id, valid.values)  # type: ignore[assignment]
        brief.review_status = REVIEW_STATUS_REVIEWED  # type: ignore[assignment]
        brief.reviewed_at = datetime.now(timezone.utc)  # type: ignore[assignment]
        brief.reviewed_by = reviewed_by  # type: ignore[assignment]
        self.db.flush()

    def get_brief_priority(self, org_id: int, brief_id: int) -> BriefPriorityRead:
        brief = self.get_brief(org_id, brief_id)
        return self.to_priority_read(brief)

    @staticmethod
    def to_priority_read(brief: ProjectBrief) -> BriefPriorityRead:
        framework_id = get_framework(brief.framework_id or "simple").id
        data = brief.priority_data
        display = format_priority_display(framework_id, data) if data else None
        return BriefPriorityRead(
            brief_id=brief.id,
            org_id=brief.org_id,
            title=brief.title,
            review_status=brief.review_status or "pending",
            framework_id=framework_id,
            priority_data=data,
            priority=brief.priority,
            reviewed_at=brief.reviewed_at,
            reviewed_by=brief.reviewed_by,
            display=display,
        )


def make_save_handler(
    session_factory: Callable[[], Session],
    org_id: int,
    brief_id: int,
    reviewed_by: Optional[str] = None,
):
    """Async (value, framework_id) handler for PriorityModal.on_save.

    Each call runs in a worker thread with its own session and commits on
    success; any error is raised to the modal after rolling back.
    """

    def _write(value: PriorityValues, framework_id: str) -> BriefPriorityRead:
        db = session_factory()
        try:
            svc = BriefReviewService(db)
            brief = svc.submit_review(org_id, brief_id, value, framework_id, reviewed_by=reviewed_by)
            db.commit()
            return svc.to_priority_read(brief)
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    async def save(value: PriorityValues, framework_id: str) -> BriefPriorityRead:
        return await asyncio.to_thread(_write, value, framework_id)

    return save


__all__ = [
    "BriefNotFoundError",
    "OrganizationNotFoundError",
    "UnknownFrameworkError",
    "FrameworkNotEnabledError",
    "OrgPrioritySettings",
    "resolve_org_settings",
    "legacy_sort_priority",
    "BriefReviewService",
    "make_save_handler",
]
