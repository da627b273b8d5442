# brief_prioritization_project/app/api/routes/briefs.py

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.api.deps import get_db, require_shared_secret
from app.api.schemas.priority import BriefReviewRequest
from app.schemas.brief import BriefPriorityRead
from app.services.brief_review_service import (
    BriefNotFoundError,
    BriefReviewService,
    FrameworkNotEnabledError,
    OrganizationNotFoundError,
    UnknownFrameworkError,
)
from app.services.prioritization import PriorityValidationError

logger = logging.getLogger("app.api.briefs")

router = APIRouter(prefix="/orgs/{org_id}/briefs", tags=["briefs"])


@router.post(
    "/{brief_id}/review",
    response_model=BriefPriorityRead,
    dependencies=[Depends(require_shared_secret)],
)
def submit_review(
    org_id: int,
    brief_id: int,
    req: BriefReviewRequest,
    db: Session = Depends(get_db),
):
    """
    Persist a reviewer's (priorityData, frameworkId) for a brief.
    """
    svc = BriefReviewService(db)
    try:
        brief = svc.submit_review(
            org_id=org_id,
            brief_id=brief_id,
            priority_data=req.priority_data,
            framework_id=req.framework_id,
            reviewed_by=req.reviewed_by,
            legacy_priority=req.priority,
        )
        db.commit()
    except (OrganizationNotFoundError, BriefNotFoundError) as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e)) from e
    except PriorityValidationError as e:
        db.rollback()
        logger.info(
            "brief_review.rejected",
            extra={"org_id": org_id, "brief_id": brief_id, "framework": e.framework_id, "errors": e.errors},
        )
        return JSONResponse(status_code=400, content={"detail": "Invalid priority", "errors": e.errors})
    except FrameworkNotEnabledError as e:
        db.rollback()
        raise HTTPException(status_code=403, detail=str(e)) from e
    except UnknownFrameworkError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e)) from e
    except Exception as e:
        db.rollback()
        logger.exception("brief_review.failed", extra={"org_id": org_id, "brief_id": brief_id})
        raise HTTPException(status_code=500, detail=f"Failed to submit brief review: {e}") from e

    return svc.to_priority_read(brief)


@router.get(
    "/{brief_id}/priority",
    response_model=BriefPriorityRead,
    dependencies=[Depends(require_shared_secret)],
)
def get_brief_priority(org_id: int, brief_id: int, db: Session = Depends(get_db)) -> BriefPriorityRead:
    """
    Stored priority of a brief, rendered with its framework.
    """
    try:
        return BriefReviewService(db).get_brief_priority(org_id, brief_id)
    except BriefNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
