# brief_prioritization_project/app/api/routes/frameworks.py

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps import get_db, require_shared_secret
from app.api.schemas.priority import (
    FrameworkCatalogResponse,
    OrgFrameworksResponse,
    PriorityPreviewRequest,
    PriorityPreviewResponse,
)
from app.schemas.framework import FrameworkRead
from app.services.brief_review_service import BriefReviewService, OrganizationNotFoundError
from app.services.prioritization import (
    DEFAULT_REGISTRY,
    calculate_priority_score,
    format_priority_display,
    get_all_frameworks,
    get_framework,
    validate_priority_values,
)


router = APIRouter(tags=["prioritization"])


@router.get("/prioritization/frameworks", response_model=FrameworkCatalogResponse)
def list_frameworks() -> FrameworkCatalogResponse:
    """
    Full framework catalog in registry order.
    """
    default_id = DEFAULT_REGISTRY.default.id
    return FrameworkCatalogResponse(
        frameworks=[FrameworkRead.from_framework(fw, default_id) for fw in get_all_frameworks()]
    )


@router.get(
    "/orgs/{org_id}/prioritization-frameworks",
    response_model=OrgFrameworksResponse,
    dependencies=[Depends(require_shared_secret)],
)
def list_org_frameworks(org_id: int, db: Session = Depends(get_db)) -> OrgFrameworksResponse:
    """
    Catalog plus the organization's enabled and default frameworks.
    """
    try:
        org_settings = BriefReviewService(db).org_settings(org_id)
    except OrganizationNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e

    return OrgFrameworksResponse(
        org_id=org_id,
        default_framework_id=org_settings.default_framework,
        enabled_framework_ids=org_settings.enabled_frameworks,
        frameworks=[
            FrameworkRead.from_framework(fw, org_settings.default_framework) for fw in get_all_frameworks()
        ],
    )


@router.post("/prioritization/preview", response_model=PriorityPreviewResponse)
def preview_priority(req: PriorityPreviewRequest) -> PriorityPreviewResponse:
    """
    Score, label and validate a value without persisting it.
    """
    framework = get_framework(req.framework_id)
    errors = validate_priority_values(framework.id, req.values)
    return PriorityPreviewResponse(
        framework_id=framework.id,
        score=calculate_priority_score(framework.id, req.values),
        display=format_priority_display(framework.id, req.values),
        errors=errors,
        is_valid=not errors,
    )
